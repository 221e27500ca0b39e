"""
Catalog entities.

Read-only views over the rows of the hosted `movies` and `categorie` tables.
Rows are created and updated by an external ingestion process; this
application only reads them.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from src.utils.constants import TMDB_IMAGE_BASE_URL
from src.utils.helpers import category_slug, movie_slug


def _parse_date(value: Any) -> Optional[date]:
    """Parse an ISO date (or timestamp) column, None when unusable."""
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _parse_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class Movie:
    """
    Movie row from the `movies` table.

    Attributes:
        id: Unique identifier in the hosted database
        title: Display title (French)
        release_date: Release date, None when missing or unparseable
        poster_path: Poster path on the TMDB CDN, or a full URL
        overview: Plot summary
        vote_average: Average rating (0-10)
    """

    id: int
    title: str
    release_date: Optional[date] = None
    poster_path: Optional[str] = None
    overview: Optional[str] = None
    vote_average: Optional[float] = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Movie":
        """
        Build a Movie from a PostgREST row.

        Raises:
            KeyError: if the row has no `id`
            ValueError: if the `id` is not an integer
        """
        return cls(
            id=int(record["id"]),
            title=record.get("title") or "",
            release_date=_parse_date(record.get("release_date")),
            poster_path=record.get("poster_path"),
            overview=record.get("overview"),
            vote_average=_parse_float(record.get("vote_average")),
        )

    @property
    def slug(self) -> str:
        return movie_slug(self.id, self.title)

    @property
    def path(self) -> str:
        """Public path of the movie page."""
        return f"/film/{self.slug}"

    @property
    def year(self) -> Optional[int]:
        return self.release_date.year if self.release_date else None

    @property
    def poster_url(self) -> Optional[str]:
        if not self.poster_path:
            return None
        if self.poster_path.startswith(("http://", "https://")):
            return self.poster_path
        return f"{TMDB_IMAGE_BASE_URL}{self.poster_path}"


@dataclass(frozen=True)
class Category:
    """
    Category row from the `categorie` table.

    The sitemap only selects `name`, hence the optional id. The id is kept
    as read from the row, integer or text.
    """

    name: str
    id: Optional[int | str] = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Category":
        """
        Build a Category from a PostgREST row.

        Raises:
            KeyError: if the row has no `name`
        """
        return cls(name=record["name"] or "", id=record.get("id"))

    @property
    def slug(self) -> str:
        return category_slug(self.name)

    @property
    def path(self) -> str:
        """Public path of the category page."""
        return f"/categorie/{self.slug}"
