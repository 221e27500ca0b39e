"""
Objets valeur pour le sitemap.

Une entree de sitemap par URL publique, recalculee a chaque requete.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ChangeFrequency(Enum):
    """Frequence de modification annoncee aux moteurs de recherche (protocole sitemap 0.9)."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True)
class SitemapEntry:
    """
    Entree de sitemap.

    Attributs :
        url : URL absolue de la page
        last_modified : Date de derniere modification
        change_frequency : Frequence de modification
        priority : Priorite relative dans [0, 1]
    """

    url: str
    last_modified: datetime
    change_frequency: ChangeFrequency
    priority: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.priority <= 1.0:
            raise ValueError(f"priority doit etre dans [0, 1] (recu {self.priority})")

    @property
    def lastmod(self) -> str:
        """Date au format W3C Datetime attendu par <lastmod>."""
        return self.last_modified.isoformat()

    @property
    def priority_label(self) -> str:
        return f"{self.priority:.1f}"
