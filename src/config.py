"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
GRATUIT_STREAMING_, et peut optionnellement être fournie via un fichier .env.

Les paramètres Supabase sont optionnels : sans eux, les requêtes échouent
proprement et les pages sont rendues vides.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.constants import DEFAULT_SITE_URL

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe GRATUIT_STREAMING_.
    Exemple : GRATUIT_STREAMING_SITE_URL=https://staging.gratuit-streaming.fr
    """

    model_config = SettingsConfigDict(
        env_prefix="GRATUIT_STREAMING_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # URL publique du site (URLs canoniques et sitemap)
    site_url: str = Field(default=DEFAULT_SITE_URL)

    # Base Supabase (OPTIONNELLE - pages vides si non définie)
    supabase_url: Optional[str] = Field(default=None)
    supabase_key: Optional[str] = Field(default=None)
    request_timeout: float = Field(default=10.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/gratuit-streaming.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("site_url", "supabase_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Retire le slash final pour concaténer les chemins sans doublon."""
        if v is None:
            return v
        return v.rstrip("/")

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def supabase_enabled(self) -> bool:
        """Vérifie si la base Supabase est configurée."""
        return bool(self.supabase_url) and bool(self.supabase_key)
