"""ADSDASH — Gateway fetchers for the dashboard.

A fetcher is an async callable returning the gateway's
`(status_code, payload)`. The dashboard only depends on that contract.
"""

from typing import Any, Optional

import httpx

from app.config import settings
from app.connectors.backend import factory
from app.connectors.backend.base import AdStore
from app.gateway.service import fetch_all_ads

GATEWAY_PATH = "/api/fetchallAds"


def local_fetcher(store: AdStore):
    """Call the gateway in-process against `store`."""

    async def fetch() -> tuple[int, Any]:
        return await fetch_all_ads(store)

    return fetch


class HttpGatewayFetcher:
    """Call a separately deployed gateway over HTTP."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.gateway_url).rstrip("/")
        self._transport = transport

    async def __call__(self) -> tuple[int, Any]:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.request_timeout,
            transport=self._transport,
        ) as client:
            resp = await client.get(GATEWAY_PATH)
            return resp.status_code, resp.json()


async def get_fetcher():
    """Dependency — yields the page's fetcher.

    A backend store is only built when the gateway runs in-process.
    """
    if settings.gateway_url:
        yield HttpGatewayFetcher()
        return

    store = factory.create_store()
    try:
        yield local_fetcher(store)
    finally:
        await store.close()
