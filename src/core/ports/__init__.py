"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- IDataStore / QueryResult : Lecture des tables hébergées
- IMovieRepository / ICategoryRepository : Lecture du catalogue
"""

from src.core.ports.data_store import IDataStore, QueryResult
from src.core.ports.repositories import ICategoryRepository, IMovieRepository

__all__ = [
    "IDataStore",
    "QueryResult",
    "IMovieRepository",
    "ICategoryRepository",
]
