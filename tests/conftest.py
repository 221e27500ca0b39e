"""
Fixtures pytest partagees pour les tests Gratuit Streaming.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec URL de site et fichier de log temporaires
- Base en memoire pre-remplie (films, categories)
- Container DI dont le client Supabase est remplace par la base en memoire
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

import pytest
from dependency_injector import providers

from src.config import Settings
from src.container import Container
from src.utils.constants import CATEGORIES_TABLE, MOVIES_TABLE
from tests.fixtures.in_memory_store import InMemoryDataStore
from tests.fixtures.supabase_rows import CATEGORY_ROWS, MOVIE_ROWS

SITE_URL = "https://test.gratuit-streaming.fr"
FROZEN_NOW = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test.

    Aucune base Supabase n'est configuree : les tests passent par
    la base en memoire ou par respx.
    """
    return Settings(
        site_url=SITE_URL,
        supabase_url=None,
        supabase_key=None,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def data_store() -> InMemoryDataStore:
    """Base en memoire avec trois films et trois categories."""
    return InMemoryDataStore(
        tables={
            MOVIES_TABLE: [dict(row) for row in MOVIE_ROWS],
            CATEGORIES_TABLE: [dict(row) for row in CATEGORY_ROWS],
        }
    )


@pytest.fixture
def container(test_settings: Settings, data_store: InMemoryDataStore) -> Iterator[Container]:
    """Container DI branche sur la base en memoire."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.data_store.override(providers.Object(data_store))
    yield container
    container.reset_override()


@pytest.fixture
def frozen_now() -> datetime:
    """Horloge figee pour les dates de modification du sitemap."""
    return FROZEN_NOW
