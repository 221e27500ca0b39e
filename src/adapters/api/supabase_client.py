"""
Client Supabase (PostgREST) en lecture seule.

Implemente l'interface IDataStore au-dessus de l'API REST de Supabase.
Toute erreur (reseau, statut HTTP, JSON invalide, configuration absente)
est journalisee puis retournee dans un QueryResult : le client ne leve
jamais d'exception vers l'appelant.

Usage:
    client = SupabaseClient(base_url="https://xyz.supabase.co", api_key="anon")
    result = await client.select(
        "movies", order_by="release_date", descending=True,
        row_range=(0, 29), count_exact=True,
    )
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.core.ports.data_store import IDataStore, QueryResult

# Plage demandee au-dela de la fin de la table
_RANGE_NOT_SATISFIABLE = 416


def parse_content_range(header: Optional[str]) -> Optional[int]:
    """
    Extrait le total d'un en-tete Content-Range PostgREST.

    Formats : "0-29/45", "*/45", "0-29/*" (total inconnu).

    Returns:
        Le total de lignes, ou None s'il est absent ou illisible
    """
    if not header or "/" not in header:
        return None
    total = header.rsplit("/", 1)[1].strip()
    if not total.isdigit():
        return None
    return int(total)


class SupabaseClient(IDataStore):
    """
    Client PostgREST pour les tables hebergees sur Supabase.

    Attributes:
        REST_PATH: Prefixe de l'API REST de Supabase
    """

    REST_PATH = "/rest/v1"

    def __init__(
        self,
        base_url: Optional[str],
        api_key: Optional[str],
        timeout: float = 10.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL du projet Supabase (None si non configure)
            api_key: Cle anonyme du projet
            timeout: Delai maximum d'une requete en secondes
        """
        self._base_url = base_url
        self._api_key = api_key
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def configured(self) -> bool:
        return bool(self._base_url) and bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=f"{self._base_url}{self.REST_PATH}",
                headers={
                    "apikey": self._api_key or "",
                    "Authorization": f"Bearer {self._api_key}",
                    "Accept": "application/json",
                },
                timeout=self._timeout,
            )
        return self._client

    async def select(
        self,
        table: str,
        columns: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False,
        row_range: Optional[tuple[int, int]] = None,
        count_exact: bool = False,
    ) -> QueryResult[dict[str, Any]]:
        """
        Lit des lignes d'une table via GET /rest/v1/{table}.

        Une plage situee apres la derniere ligne (416) est une page vide
        et non une erreur ; son total reste exploite.
        """
        if not self.configured:
            logger.warning("Supabase non configure, lecture ignoree", table=table)
            return QueryResult.failure("Supabase non configure")

        params: dict[str, Any] = {"select": columns}
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"
        if row_range is not None:
            first, last = row_range
            params["offset"] = first
            params["limit"] = last - first + 1

        headers = {"Prefer": "count=exact"} if count_exact else {}

        try:
            response = await self._get_client().get(
                f"/{table}", params=params, headers=headers
            )
            if response.status_code == _RANGE_NOT_SATISFIABLE:
                count = parse_content_range(response.headers.get("Content-Range"))
                logger.debug("Plage hors limites", table=table, params=params, count=count)
                return QueryResult(records=[], count=count)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Echec de lecture Supabase",
                table=table,
                status=e.response.status_code,
                body=e.response.text[:200],
            )
            return QueryResult.failure(f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.warning("Erreur reseau Supabase", table=table, error=str(e))
            return QueryResult.failure(str(e) or type(e).__name__)
        except ValueError as e:
            logger.warning("Reponse JSON invalide", table=table, error=str(e))
            return QueryResult.failure("JSON invalide")

        if not isinstance(data, list):
            logger.warning("Reponse inattendue", table=table, payload_type=type(data).__name__)
            return QueryResult.failure("Reponse inattendue")

        count = None
        if count_exact:
            count = parse_content_range(response.headers.get("Content-Range"))

        logger.debug("Lecture Supabase", table=table, rows=len(data), count=count)
        return QueryResult(records=data, count=count)

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
