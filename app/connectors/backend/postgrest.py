"""ADSDASH — Hosted Backend REST Store.

Reads the ads table through the backend-as-a-service REST interface
(Supabase / PostgREST). One GET per fetch, no retries.
"""

from typing import Any, Dict, List, Optional

import httpx

from app.config import settings
from app.connectors.backend.base import AdStore, StoreQueryError
from app.core.logging import get_logger

logger = get_logger("backend.postgrest")


def _error_message(resp: httpx.Response) -> str:
    """Pull the backend's error message out of an error response."""
    if resp.headers.get("content-type", "").startswith("application/json"):
        body = resp.json()
        if isinstance(body, dict):
            for key in ("message", "error_description", "error", "msg"):
                if body.get(key):
                    return str(body[key])
    return resp.text or f"HTTP {resp.status_code}"


class PostgrestAdStore(AdStore):
    """Async REST client for the hosted ads table."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        table: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.supabase_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.supabase_key
        self.table = table or settings.ads_table
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=settings.request_timeout, transport=self._transport
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def fetch_latest(self, limit: int) -> List[Dict[str, Any]]:
        params = {
            "select": "*",
            "order": "created_at.desc",
            "limit": str(limit),
        }
        client = await self._get_client()
        resp = await client.get(self.endpoint, params=params, headers=self._headers())

        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.warning(
                f"Backend rejected query on {self.table}: {message}",
                extra={"status_code": resp.status_code},
            )
            raise StoreQueryError(message, resp.status_code)

        data = resp.json()
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of rows, got {type(data).__name__}")
        return data
