"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, avec l'identifiant de requête
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique
- Redirection des loggers standards (uvicorn) vers loguru
"""

import logging
import sys
import uuid
from pathlib import Path

from loguru import logger

# Valeur de request_id hors du contexte d'une requête HTTP
NO_REQUEST_ID = "-"

# Loggers standards redirigés vers loguru
_STDLIB_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class InterceptHandler(logging.Handler):
    """Transmet les enregistrements du module logging standard à loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def generate_request_id() -> str:
    """Identifiant court d'une requête, ajouté au contexte loguru par le middleware web."""
    return uuid.uuid4().hex[:8]


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/gratuit-streaming.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()
    logger.configure(extra={"request_id": NO_REQUEST_ID})

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "[{extra[request_id]}] "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in _STDLIB_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
