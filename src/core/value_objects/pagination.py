"""
Objets valeur pour la pagination de la page d'accueil.

Fenetre de pagination (page, offset, plage de lignes, nombre total de pages)
et liens de navigation calcules a partir de la page courante.
"""

import math
from dataclasses import dataclass
from typing import Optional

from src.utils.constants import PAGE_SIZE


@dataclass(frozen=True)
class PageWindow:
    """
    Fenetre de lignes selectionnee pour une page.

    Attributs :
        page : Numero de page (commence a 1)
        page_size : Nombre de lignes par page

    Proprietes :
        offset : Index de la premiere ligne (commence a 0)
        last_row : Index inclusif de la derniere ligne demandee
    """

    page: int = 1
    page_size: int = PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page doit etre >= 1 (recu {self.page})")
        if self.page_size < 1:
            raise ValueError(f"page_size doit etre >= 1 (recu {self.page_size})")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def last_row(self) -> int:
        return self.offset + self.page_size - 1

    def total_pages(self, total_count: Optional[int]) -> int:
        """Nombre total de pages ; un total indisponible (None) compte pour 0."""
        return math.ceil(max(total_count or 0, 0) / self.page_size)


@dataclass(frozen=True)
class PageLink:
    """
    Lien de pagination.

    Un lien sans numero (number=None) represente une ellipse entre deux plages.
    """

    number: Optional[int]
    url: Optional[str] = None
    current: bool = False

    @property
    def is_gap(self) -> bool:
        return self.number is None


def page_url(base_path: str, page: int) -> str:
    """URL d'une page : la page 1 pointe sur le chemin de base."""
    if page <= 1:
        return base_path
    return f"{base_path}?page={page}"


@dataclass(frozen=True)
class Pagination:
    """
    Controles de pagination (precedent, suivant, numeros de page).

    Attributs :
        current_page : Page affichee
        total_pages : Nombre total de pages (peut valoir 0)
        base_path : Chemin de base des liens
        radius : Nombre de pages affichees de chaque cote de la page courante
    """

    current_page: int
    total_pages: int
    base_path: str = "/"
    radius: int = 2

    @property
    def visible(self) -> bool:
        return self.total_pages > 1

    @property
    def previous_url(self) -> Optional[str]:
        if self.current_page > 1 and self.total_pages > 0:
            return page_url(self.base_path, min(self.current_page - 1, self.total_pages))
        return None

    @property
    def next_url(self) -> Optional[str]:
        if self.current_page < self.total_pages:
            return page_url(self.base_path, self.current_page + 1)
        return None

    def links(self) -> list[PageLink]:
        """
        Liens numerotes : premiere et derniere page, plus une fenetre
        de `radius` pages autour de la page courante, avec ellipses.
        """
        if self.total_pages <= 0:
            return []

        numbers = {1, self.total_pages}
        start = max(1, self.current_page - self.radius)
        end = min(self.total_pages, self.current_page + self.radius)
        numbers.update(range(start, end + 1))

        links: list[PageLink] = []
        previous = 0
        for number in sorted(numbers):
            if number - previous > 1:
                links.append(PageLink(number=None))
            links.append(
                PageLink(
                    number=number,
                    url=page_url(self.base_path, number),
                    current=number == self.current_page,
                )
            )
            previous = number
        return links
