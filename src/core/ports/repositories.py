"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les lectures du catalogue.
Les implementations (adaptateurs) s'appuient sur la base hebergee ;
les tests utilisent une base en memoire.
"""

from abc import ABC, abstractmethod

from src.core.entities.catalog import Category, Movie
from src.core.ports.data_store import QueryResult
from src.core.value_objects.pagination import PageWindow


class IMovieRepository(ABC):
    """
    Interface de lecture des films.
    """

    @abstractmethod
    async def list_latest(self, window: PageWindow) -> QueryResult[Movie]:
        """Films les plus recents d'une page, avec le nombre total exact."""
        ...

    @abstractmethod
    async def list_all(self) -> QueryResult[Movie]:
        """Tous les films (id, titre, date de sortie), plus recents d'abord."""
        ...


class ICategoryRepository(ABC):
    """
    Interface de lecture des categories.
    """

    @abstractmethod
    async def list_all(self) -> QueryResult[Category]:
        """Toutes les categories, toutes colonnes."""
        ...

    @abstractmethod
    async def list_names(self) -> QueryResult[Category]:
        """Toutes les categories, nom seulement."""
        ...
