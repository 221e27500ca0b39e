"""
Route du sitemap (protocole sitemaps.org 0.9).
"""

from fastapi import APIRouter, Request

from ..deps import get_container, templates

router = APIRouter()


@router.get("/sitemap.xml")
async def sitemap(request: Request):
    """Sitemap XML : pages statiques, films puis catégories."""
    entries = await get_container(request).sitemap_service().build()
    return templates.TemplateResponse(
        request,
        "sitemap.xml",
        {"entries": entries},
        media_type="application/xml",
    )
