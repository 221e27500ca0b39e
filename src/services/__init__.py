"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- HomepageService: latest movies page, categories and SEO metadata
- SitemapService: search-engine sitemap entries

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""

from src.services.homepage import HomepageService, HomepageView
from src.services.sitemap import SitemapService

__all__ = [
    "HomepageService",
    "HomepageView",
    "SitemapService",
]
