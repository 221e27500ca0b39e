"""
Interface port pour la base de donnees hebergee.

Le site ne fait que lire des tables pre-remplies. Chaque lecture retourne
un QueryResult : les echecs ne levent jamais d'exception, ils sont portes
par le champ `error` et c'est a l'appelant de decider quoi en faire.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """
    Resultat d'une lecture.

    Attributs :
        records : Lignes retournees (vide en cas d'erreur)
        count : Nombre total exact de lignes si demande, sinon None
        error : Message d'erreur, None si la lecture a reussi
    """

    records: list[T] = field(default_factory=list)
    count: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: str) -> "QueryResult[T]":
        return cls(records=[], count=None, error=error)

    def records_or_empty(self) -> list[T]:
        """Lignes de la lecture, ou liste vide si elle a echoue."""
        return list(self.records) if self.ok else []


class IDataStore(ABC):
    """
    Interface de lecture sur les tables hebergees.

    Supporte les lectures completes, le tri sur une colonne, la selection
    d'une plage de lignes et le comptage exact.
    """

    @abstractmethod
    async def select(
        self,
        table: str,
        columns: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False,
        row_range: Optional[tuple[int, int]] = None,
        count_exact: bool = False,
    ) -> QueryResult[dict[str, Any]]:
        """
        Lit des lignes d'une table.

        Args:
            table: Nom de la table
            columns: Colonnes selectionnees (syntaxe PostgREST, ex: "id,title")
            order_by: Colonne de tri optionnelle
            descending: Tri decroissant si True
            row_range: Plage inclusive (premiere, derniere) de lignes, indexee a 0
            count_exact: Demande le nombre total exact de lignes

        Returns:
            QueryResult avec les lignes brutes, ou portant l'erreur
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources de transport."""
        ...
