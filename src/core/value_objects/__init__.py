"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- PageWindow : Fenetre de lignes d'une page (offset, plage, total de pages)
- Pagination / PageLink : Controles de navigation entre pages
- SitemapEntry / ChangeFrequency : Entrees du sitemap
"""

from src.core.value_objects.pagination import PageLink, PageWindow, Pagination, page_url
from src.core.value_objects.sitemap import ChangeFrequency, SitemapEntry

__all__ = [
    "PageWindow",
    "PageLink",
    "Pagination",
    "page_url",
    "ChangeFrequency",
    "SitemapEntry",
]
