"""
Implementation Supabase du repository Category.

Implemente l'interface ICategoryRepository en lisant la table `categorie`.
"""

from src.core.entities.catalog import Category
from src.core.ports.data_store import IDataStore, QueryResult
from src.core.ports.repositories import ICategoryRepository
from src.infrastructure.persistence.repositories.conversion import convert_rows
from src.utils.constants import CATEGORIES_TABLE


class SupabaseCategoryRepository(ICategoryRepository):
    """Repository des categories adosse a la table `categorie`."""

    def __init__(self, data_store: IDataStore) -> None:
        self._data_store = data_store

    async def list_all(self) -> QueryResult[Category]:
        return await self._select("*")

    async def list_names(self) -> QueryResult[Category]:
        return await self._select("name")

    async def _select(self, columns: str) -> QueryResult[Category]:
        result = await self._data_store.select(CATEGORIES_TABLE, columns=columns)
        if not result.ok:
            return QueryResult.failure(result.error)
        return QueryResult(
            records=convert_rows(result.records, Category.from_record, CATEGORIES_TABLE),
            count=result.count,
        )
