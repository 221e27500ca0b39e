"""
Utilitaires et constantes pour Gratuit Streaming.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import PAGE_SIZE, SITE_NAME
from src.utils.helpers import category_slug, movie_slug, parse_page, slugify

__all__ = [
    "PAGE_SIZE",
    "SITE_NAME",
    "slugify",
    "movie_slug",
    "category_slug",
    "parse_page",
]
