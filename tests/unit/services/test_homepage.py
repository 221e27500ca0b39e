"""
Tests du service de la page d'accueil.

Verifie:
- la resolution du parametre `page` et la plage de lignes demandee
- le calcul du nombre de pages (y compris total indisponible)
- le mode degrade quand une lecture echoue
- l'URL canonique
"""

import asyncio

import pytest

from src.config import Settings
from src.core.ports.data_store import QueryResult
from src.core.value_objects.pagination import PageWindow
from src.infrastructure.persistence.repositories import (
    SupabaseCategoryRepository,
    SupabaseMovieRepository,
)
from src.services.homepage import HomepageService, canonical_url
from tests.fixtures.in_memory_store import InMemoryDataStore
from tests.fixtures.supabase_rows import CATEGORY_ROWS, make_movie_rows


def _service(store: InMemoryDataStore, settings: Settings) -> HomepageService:
    return HomepageService(
        movie_repo=SupabaseMovieRepository(data_store=store),
        category_repo=SupabaseCategoryRepository(data_store=store),
        settings=settings,
    )


def _movie_call(store: InMemoryDataStore) -> dict:
    return next(c for c in store.calls if c["table"] == "movies")


class TestResolutionDePage:
    """Le parametre brut est normalise avant la requete."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [None, "abc", "0", "-2", ""])
    async def test_parametre_invalide_donne_page_1(self, raw, data_store, test_settings):
        view = await _service(data_store, test_settings).build(raw)

        assert view.page == 1
        assert _movie_call(data_store)["row_range"] == (0, 29)

    @pytest.mark.asyncio
    async def test_page_valide(self, data_store, test_settings):
        view = await _service(data_store, test_settings).build("4")

        assert view.page == 4
        assert _movie_call(data_store)["row_range"] == (90, 119)


class TestPagination:
    @pytest.mark.asyncio
    async def test_45_films_donnent_2_pages(self, test_settings):
        store = InMemoryDataStore(tables={"movies": make_movie_rows(45)})

        first = await _service(store, test_settings).build(None)
        second = await _service(store, test_settings).build("2")

        assert first.total_pages == 2
        assert first.total_count == 45
        assert len(first.movies) == 30
        assert len(second.movies) == 15
        assert first.pagination.next_url == "/?page=2"
        assert second.pagination.previous_url == "/"

    @pytest.mark.asyncio
    async def test_aucun_film(self, test_settings):
        view = await _service(InMemoryDataStore(), test_settings).build(None)

        assert view.total_pages == 0
        assert view.movies == []
        assert not view.pagination.visible

    @pytest.mark.asyncio
    async def test_total_indisponible_vaut_zero(self, test_settings):
        store = InMemoryDataStore(tables={"movies": make_movie_rows(5)}, null_count=True)

        view = await _service(store, test_settings).build(None)

        assert len(view.movies) == 5
        assert view.total_count == 0
        assert view.total_pages == 0

    @pytest.mark.asyncio
    async def test_page_hors_limites(self, data_store, test_settings):
        view = await _service(data_store, test_settings).build("99")

        assert view.page == 99
        assert view.movies == []
        assert view.total_pages == 1
        assert [c.name for c in view.categories][0] == "Action"


class TestModeDegrade:
    """Une lecture en echec est remplacee par une liste vide."""

    @pytest.mark.asyncio
    async def test_echec_des_films(self, test_settings):
        store = InMemoryDataStore(
            tables={"categorie": list(CATEGORY_ROWS)}, failing_tables={"movies"}
        )

        view = await _service(store, test_settings).build("2")

        assert view.movies == []
        assert view.total_pages == 0
        assert len(view.categories) == 3

    @pytest.mark.asyncio
    async def test_echec_des_categories(self, test_settings):
        store = InMemoryDataStore(
            tables={"movies": make_movie_rows(3)}, failing_tables={"categorie"}
        )

        view = await _service(store, test_settings).build(None)

        assert view.categories == []
        assert len(view.movies) == 3
        assert view.total_pages == 1

    @pytest.mark.asyncio
    async def test_echec_total(self, test_settings):
        store = InMemoryDataStore(failing_tables={"movies", "categorie"})

        view = await _service(store, test_settings).build(None)

        assert view.movies == []
        assert view.categories == []
        assert view.total_pages == 0


class TestLecturesConcurrentes:
    @pytest.mark.asyncio
    async def test_les_deux_lectures_sont_lancees_ensemble(self, test_settings):
        """La lecture des categories demarre avant la fin de celle des films."""
        started: list[str] = []
        release = asyncio.Event()

        class SlowMovies:
            async def list_latest(self, window: PageWindow):
                started.append("movies")
                await release.wait()
                return QueryResult(records=[], count=0)

        class Categories:
            async def list_all(self):
                started.append("categories")
                release.set()
                return QueryResult(records=[])

        service = HomepageService(SlowMovies(), Categories(), test_settings)

        view = await asyncio.wait_for(service.build(None), timeout=1)

        assert sorted(started) == ["categories", "movies"]
        assert view.total_pages == 0


class TestCanonicalUrl:
    SITE = "https://gratuit-streaming.fr"

    def test_sans_parametre(self):
        assert canonical_url(self.SITE, 1, None) == self.SITE

    def test_page_superieure_a_1(self):
        assert canonical_url(self.SITE, 3, "3") == self.SITE

    def test_parametre_brut_conserve_en_page_1(self):
        assert canonical_url(self.SITE, 1, "1") == f"{self.SITE}?page=1"
        assert canonical_url(self.SITE, 1, "abc") == f"{self.SITE}?page=abc"

    @pytest.mark.asyncio
    async def test_vue(self, data_store, test_settings):
        view = await _service(data_store, test_settings).build("2")

        assert view.canonical_url == test_settings.site_url
        assert view.title.startswith("Gratuit Streaming")
