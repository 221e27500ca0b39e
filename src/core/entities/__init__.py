"""
Business entities representing core domain concepts.

Exports:
- Movie: Movie row from the hosted database
- Category: Category row from the hosted database
"""

from src.core.entities.catalog import Category, Movie

__all__ = [
    "Movie",
    "Category",
]
