"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
configuration, client de la base hebergee, repositories et services.
"""

from dependency_injector import containers, providers

from .adapters.api.supabase_client import SupabaseClient
from .config import Settings
from .infrastructure.persistence.repositories import (
    SupabaseCategoryRepository,
    SupabaseMovieRepository,
)
from .services.homepage import HomepageService
from .services.sitemap import SitemapService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.homepage_service()
        view = await service.build(page="2")
        await container.data_store().close()

    Dans les tests, le client peut etre remplace :
        container.data_store.override(providers.Object(fake_store))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client HTTP partage par toutes les requetes
    data_store = providers.Singleton(
        SupabaseClient,
        base_url=config.provided.supabase_url,
        api_key=config.provided.supabase_key,
        timeout=config.provided.request_timeout,
    )

    # Repositories - sans etat, une instance par requete
    movie_repository = providers.Factory(
        SupabaseMovieRepository,
        data_store=data_store,
    )
    category_repository = providers.Factory(
        SupabaseCategoryRepository,
        data_store=data_store,
    )

    # Services
    homepage_service = providers.Factory(
        HomepageService,
        movie_repo=movie_repository,
        category_repo=category_repository,
        settings=config,
    )
    sitemap_service = providers.Factory(
        SitemapService,
        movie_repo=movie_repository,
        category_repo=category_repository,
        settings=config,
    )
