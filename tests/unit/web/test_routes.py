"""Tests des routes web (accueil et sitemap) avec la base en memoire."""

import xml.etree.ElementTree as ET

from dependency_injector import providers
from fastapi.testclient import TestClient

from src.web.app import create_app
from tests.fixtures.in_memory_store import InMemoryDataStore
from tests.fixtures.supabase_rows import CATEGORY_ROWS, make_movie_rows

_SITEMAP_NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}


def _client(container) -> TestClient:
    return TestClient(create_app(container))


class TestHomeRoute:
    """Tests de la page d'accueil."""

    def test_affiche_films_et_categories(self, container):
        resp = _client(container).get("/")

        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "Les Misérables" in resp.text
        assert 'href="/film/7-la-haine"' in resp.text
        assert 'href="/categorie/comedie"' in resp.text
        assert "Catégories populaires" in resp.text
        assert "Pourquoi choisir Gratuit-Streaming.fr ?" in resp.text
        assert '<link rel="canonical" href="https://test.gratuit-streaming.fr">' in resp.text
        # Une seule page : pas de pagination
        assert 'class="pagination"' not in resp.text

    def test_parametre_page_invalide(self, container, data_store):
        resp = _client(container).get("/", params={"page": "abc"})

        assert resp.status_code == 200
        assert "La Haine" in resp.text
        movie_call = next(c for c in data_store.calls if c["table"] == "movies")
        assert movie_call["row_range"] == (0, 29)

    def test_pagination(self, container, data_store):
        data_store.tables["movies"] = make_movie_rows(45)

        resp = _client(container).get("/")

        assert 'class="pagination"' in resp.text
        assert 'href="/?page=2"' in resp.text
        assert "<strong>45</strong> films disponibles" in resp.text

    def test_page_hors_limites(self, container):
        resp = _client(container).get("/", params={"page": "50"})

        assert resp.status_code == 200
        assert "Aucun film à afficher" in resp.text

    def test_base_en_panne(self, container, data_store):
        """Une base indisponible donne une page vide, pas une erreur."""
        data_store.failing_tables = {"movies", "categorie"}

        resp = _client(container).get("/?page=3")

        assert resp.status_code == 200
        assert "Aucun film à afficher" in resp.text
        assert "Aucune catégorie disponible" in resp.text
        assert 'class="pagination"' not in resp.text

    def test_identifiant_de_requete(self, container):
        resp = _client(container).get("/")

        assert len(resp.headers["X-Request-ID"]) == 8


class TestSitemapRoute:
    """Tests du sitemap XML."""

    def test_document_xml(self, container):
        resp = _client(container).get("/sitemap.xml")

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/xml")

        root = ET.fromstring(resp.content)
        locs = [loc.text for loc in root.findall("sm:url/sm:loc", _SITEMAP_NS)]
        assert len(locs) == 3 + 3 + 3
        assert locs[0] == "https://test.gratuit-streaming.fr"
        assert "https://test.gratuit-streaming.fr/film/7-la-haine" in locs

        priorities = [p.text for p in root.findall("sm:url/sm:priority", _SITEMAP_NS)]
        assert priorities[:3] == ["1.0", "0.8", "0.9"]
        freqs = {f.text for f in root.findall("sm:url/sm:changefreq", _SITEMAP_NS)}
        assert freqs == {"daily", "weekly"}

    def test_sitemap_base_en_panne(self, container, data_store):
        data_store.failing_tables = {"movies", "categorie"}

        resp = _client(container).get("/sitemap.xml")

        root = ET.fromstring(resp.content)
        assert len(root.findall("sm:url", _SITEMAP_NS)) == 3

    def test_client_remplacable(self, container):
        """Le client de la base peut etre remplace a chaud dans le container."""
        store = InMemoryDataStore(tables={"categorie": list(CATEGORY_ROWS)})
        container.data_store.override(providers.Object(store))

        resp = _client(container).get("/sitemap.xml")

        root = ET.fromstring(resp.content)
        assert len(root.findall("sm:url", _SITEMAP_NS)) == 3 + 3
