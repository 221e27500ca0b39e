"""
Service de la page d'accueil.

Resout la page demandee, lit en parallele la page de films la plus recente
et la liste des categories, puis calcule la pagination et les metadonnees SEO.

Une lecture en echec est remplacee par une liste vide : la page est rendue
en mode degrade plutot que de retourner une erreur.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import quote

from loguru import logger

from src.config import Settings
from src.core.entities.catalog import Category, Movie
from src.core.ports.repositories import ICategoryRepository, IMovieRepository
from src.core.value_objects.pagination import PageWindow, Pagination
from src.utils.constants import HOME_DESCRIPTION, HOME_TITLE, PAGE_SIZE
from src.utils.helpers import parse_page


@dataclass
class HomepageView:
    """Donnees necessaires au rendu de la page d'accueil."""

    page: int
    total_pages: int
    total_count: int
    canonical_url: str
    movies: list[Movie] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    title: str = HOME_TITLE
    description: str = HOME_DESCRIPTION

    @property
    def pagination(self) -> Pagination:
        return Pagination(current_page=self.page, total_pages=self.total_pages, base_path="/")


def canonical_url(site_url: str, page: int, raw_page: Optional[str]) -> str:
    """
    URL canonique de l'accueil.

    Au-dela de la premiere page, la canonique pointe sur la racine du site ;
    sinon le parametre brut est conserve s'il a ete fourni.
    """
    if page > 1:
        return site_url
    return f"{site_url}?page={quote(raw_page, safe='')}" if raw_page else site_url


class HomepageService:
    """
    Cas d'utilisation "afficher la page d'accueil".

    Depend uniquement des ports repository et de la configuration,
    ce qui permet de le tester avec une base en memoire.
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        category_repo: ICategoryRepository,
        settings: Settings,
        page_size: int = PAGE_SIZE,
    ) -> None:
        """
        Initialise le service.

        Args:
            movie_repo: Repository des films
            category_repo: Repository des categories
            settings: Configuration (URL du site)
            page_size: Nombre de films par page
        """
        self._movie_repo = movie_repo
        self._category_repo = category_repo
        self._settings = settings
        self._page_size = page_size

    async def build(self, raw_page: Optional[str] = None) -> HomepageView:
        """
        Construit la vue de la page d'accueil.

        Args:
            raw_page: Parametre de requete `page` tel que recu (peut etre absent ou invalide)

        Returns:
            HomepageView, jamais d'exception en cas d'echec de lecture
        """
        window = PageWindow(page=parse_page(raw_page), page_size=self._page_size)

        movies_result, categories_result = await asyncio.gather(
            self._movie_repo.list_latest(window),
            self._category_repo.list_all(),
        )

        if not movies_result.ok:
            logger.warning("Films indisponibles, grille vide", error=movies_result.error)
        if not categories_result.ok:
            logger.warning(
                "Categories indisponibles, liste vide", error=categories_result.error
            )

        movies = movies_result.records_or_empty()
        # Un total indisponible vaut 0 : aucune page
        total_count = (movies_result.count or 0) if movies_result.ok else 0
        total_pages = window.total_pages(total_count)

        logger.debug(
            "Accueil construit",
            page=window.page,
            movies=len(movies),
            total_pages=total_pages,
        )

        return HomepageView(
            page=window.page,
            total_pages=total_pages,
            total_count=total_count,
            canonical_url=canonical_url(self._settings.site_url, window.page, raw_page),
            movies=movies,
            categories=categories_result.records_or_empty(),
        )
