"""
Service de generation du sitemap.

Produit, dans cet ordre : les trois pages statiques, une entree par film
(ordre de la requete) puis une entree par categorie (ordre de la requete).
"""

import asyncio
from datetime import date, datetime, time, timezone
from typing import Callable, Optional

from loguru import logger

from src.config import Settings
from src.core.entities.catalog import Category, Movie
from src.core.ports.repositories import ICategoryRepository, IMovieRepository
from src.core.value_objects.sitemap import ChangeFrequency, SitemapEntry


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_datetime(day: Optional[date], fallback: datetime) -> datetime:
    if day is None:
        return fallback
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


class SitemapService:
    """
    Cas d'utilisation "generer le sitemap".

    L'horloge est injectable pour rendre les dates de modification
    deterministes dans les tests.
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        category_repo: ICategoryRepository,
        settings: Settings,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._movie_repo = movie_repo
        self._category_repo = category_repo
        self._settings = settings
        self._clock = clock

    def static_entries(self, now: datetime) -> list[SitemapEntry]:
        """Accueil, index des categories et nouveautes."""
        base_url = self._settings.site_url
        return [
            SitemapEntry(base_url, now, ChangeFrequency.DAILY, 1.0),
            SitemapEntry(f"{base_url}/categories", now, ChangeFrequency.WEEKLY, 0.8),
            SitemapEntry(f"{base_url}/nouveautes", now, ChangeFrequency.DAILY, 0.9),
        ]

    def movie_entry(self, movie: Movie, now: datetime) -> SitemapEntry:
        return SitemapEntry(
            url=f"{self._settings.site_url}{movie.path}",
            last_modified=_as_datetime(movie.release_date, now),
            change_frequency=ChangeFrequency.WEEKLY,
            priority=0.7,
        )

    def category_entry(self, category: Category, now: datetime) -> SitemapEntry:
        return SitemapEntry(
            url=f"{self._settings.site_url}{category.path}",
            last_modified=now,
            change_frequency=ChangeFrequency.WEEKLY,
            priority=0.6,
        )

    async def build(self) -> list[SitemapEntry]:
        """
        Construit la liste complete des entrees.

        Returns:
            3 + N + M entrees pour N films et M categories lus
        """
        now = self._clock()
        movies_result, categories_result = await asyncio.gather(
            self._movie_repo.list_all(),
            self._category_repo.list_names(),
        )

        if not movies_result.ok:
            logger.warning("Films absents du sitemap", error=movies_result.error)
        if not categories_result.ok:
            logger.warning("Categories absentes du sitemap", error=categories_result.error)

        entries = self.static_entries(now)
        entries.extend(self.movie_entry(m, now) for m in movies_result.records_or_empty())
        entries.extend(
            self.category_entry(c, now) for c in categories_result.records_or_empty()
        )

        logger.debug("Sitemap construit", entries=len(entries))
        return entries
