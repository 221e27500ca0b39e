"""
Implementation Supabase du repository Movie.

Implemente l'interface IMovieRepository en lisant la table `movies`
via un IDataStore.
"""

from typing import Any

from src.core.entities.catalog import Movie
from src.core.ports.data_store import IDataStore, QueryResult
from src.core.ports.repositories import IMovieRepository
from src.core.value_objects.pagination import PageWindow
from src.infrastructure.persistence.repositories.conversion import convert_rows
from src.utils.constants import MOVIES_TABLE

# Colonnes utiles au sitemap
SITEMAP_COLUMNS = "id,title,release_date"


class SupabaseMovieRepository(IMovieRepository):
    """
    Repository des films adosse a la table `movies`.

    Convertit les lignes brutes en entites Movie ; une ligne inexploitable
    est ignoree et journalisee, le reste du resultat est conserve.
    """

    def __init__(self, data_store: IDataStore) -> None:
        """
        Initialise le repository.

        Args :
            data_store : Acces en lecture a la base hebergee
        """
        self._data_store = data_store

    async def list_latest(self, window: PageWindow) -> QueryResult[Movie]:
        result = await self._data_store.select(
            MOVIES_TABLE,
            columns="*",
            order_by="release_date",
            descending=True,
            row_range=(window.offset, window.last_row),
            count_exact=True,
        )
        return self._to_entities(result)

    async def list_all(self) -> QueryResult[Movie]:
        result = await self._data_store.select(
            MOVIES_TABLE,
            columns=SITEMAP_COLUMNS,
            order_by="release_date",
            descending=True,
        )
        return self._to_entities(result)

    def _to_entities(self, result: QueryResult[dict[str, Any]]) -> QueryResult[Movie]:
        if not result.ok:
            return QueryResult.failure(result.error)
        return QueryResult(
            records=convert_rows(result.records, Movie.from_record, MOVIES_TABLE),
            count=result.count,
        )
