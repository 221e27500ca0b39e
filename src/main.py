"""
Point d'entrée CLI de Gratuit Streaming.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console

from .config import Settings
from .container import Container
from .core.value_objects.sitemap import SitemapEntry
from .logging_config import configure_logging

app = typer.Typer(
    name="gratuit-streaming",
    help="Page d'accueil et sitemap de Gratuit Streaming",
)
container = Container()
console = Console(stderr=True)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


async def _build_sitemap() -> list[SitemapEntry]:
    try:
        return await container.sitemap_service().build()
    finally:
        await container.data_store().close()


def render_sitemap(entries: list[SitemapEntry]) -> str:
    """Rend le document XML avec le même template que la route web."""
    from .web.deps import templates

    return templates.get_template("sitemap.xml").render(entries=entries)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Gratuit Streaming")
    typer.echo(f"URL du site : {config.site_url}")
    typer.echo(f"Supabase : {config.supabase_url or 'non configuré'}")
    typer.echo(f"Timeout des requêtes : {config.request_timeout} s")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    from .web.deps import APP_VERSION

    typer.echo(f"Gratuit Streaming v{APP_VERSION}")


@app.command()
def sitemap(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Fichier de sortie (stdout par défaut)"),
    ] = None,
) -> None:
    """Génère le sitemap XML."""
    entries = asyncio.run(_build_sitemap())
    document = render_sitemap(entries)

    if output is None:
        typer.echo(document)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    console.print(f"[green]{len(entries)} URL(s)[/green] écrites dans {output}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload, log_config=None)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    if not settings.supabase_enabled:
        logger.warning("Supabase non configuré : les pages seront vides")

    app()


if __name__ == "__main__":
    main()
