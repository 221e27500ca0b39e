"""
Conversion des lignes brutes PostgREST en entites du domaine.
"""

from typing import Any, Callable, TypeVar

from loguru import logger

T = TypeVar("T")


def convert_rows(
    rows: list[dict[str, Any]],
    convert: Callable[[dict[str, Any]], T],
    table: str,
) -> list[T]:
    """
    Convertit chaque ligne avec `convert` en conservant l'ordre.

    Les lignes incompletes (colonne manquante, identifiant non entier)
    sont ignorees avec un avertissement.
    """
    entities: list[T] = []
    for row in rows:
        try:
            entities.append(convert(row))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Ligne ignoree", table=table, row=row, error=str(e))
    return entities
