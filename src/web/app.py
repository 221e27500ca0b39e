"""
Application FastAPI de Gratuit Streaming.

Initialise l'application web avec le Container DI, configure les fichiers
statiques, le suivi des requêtes dans les logs et monte les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from ..logging_config import generate_request_id
from .routes.home import router as home_router
from .routes.sitemap import router as sitemap_router

_WEB_DIR = Path(__file__).parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ferme le client HTTP de la base à l'arrêt."""
    yield
    await app.state.container.data_store().close()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI à utiliser (un nouveau par défaut)
    """
    app = FastAPI(title="Gratuit Streaming", lifespan=lifespan)
    app.state.container = container or Container()

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = generate_request_id()
        with logger.contextualize(request_id=request_id):
            logger.debug("Requete", method=request.method, path=request.url.path)
            response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    # Fichiers statiques
    app.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

    # Routes
    app.include_router(home_router)
    app.include_router(sitemap_router)
    return app


app = create_app()
