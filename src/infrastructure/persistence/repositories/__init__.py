"""
Implementations Supabase des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit un IDataStore via injection de dependances
- Convertit les lignes brutes en entites de domaine (dataclass)
"""

from src.infrastructure.persistence.repositories.category_repository import (
    SupabaseCategoryRepository,
)
from src.infrastructure.persistence.repositories.movie_repository import (
    SupabaseMovieRepository,
)

__all__ = [
    "SupabaseMovieRepository",
    "SupabaseCategoryRepository",
]
