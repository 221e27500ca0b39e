"""
Route de la page d'accueil.

Affiche les derniers films paginés, les catégories populaires
et les textes de présentation du site.
"""

from typing import Optional

from fastapi import APIRouter, Request

from ..deps import get_container, templates

router = APIRouter()


@router.get("/")
async def home(request: Request, page: Optional[str] = None):
    """Page d'accueil ; un paramètre `page` invalide affiche la première page."""
    service = get_container(request).homepage_service()
    view = await service.build(page)

    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "view": view,
            "movies": view.movies,
            "categories": view.categories,
            "pagination": view.pagination,
            "movie_count": view.total_count,
        },
    )
