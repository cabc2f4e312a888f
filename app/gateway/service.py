"""ADSDASH — Record Gateway.

Relays one bounded, ordered read of the ads table and maps the outcome onto
the gateway's response contract: `(status_code, payload)` where payload is
the row list on success or `{"error": message}` on failure.
"""

import time
from typing import Any, Optional

from app.config import settings
from app.connectors.backend.base import AdStore, StoreQueryError
from app.core.logging import get_logger

logger = get_logger("gateway")

GENERIC_ERROR = "An unexpected error occurred."


async def fetch_all_ads(
    store: AdStore, limit: Optional[int] = None
) -> tuple[int, Any]:
    """Fetch the most recent ads. Never raises."""
    limit = limit or settings.ads_fetch_limit
    started = time.perf_counter()
    try:
        rows = await store.fetch_latest(limit)
    except StoreQueryError as e:
        logger.error(f"Ads query failed: {e}", extra={"status_code": 500})
        return 500, {"error": str(e)}
    except Exception as e:
        logger.error(
            f"Unexpected error fetching ads: {e!r}", extra={"status_code": 500}
        )
        return 500, {"error": GENERIC_ERROR}

    duration_ms = round((time.perf_counter() - started) * 1000, 1)
    logger.info(
        f"Fetched {len(rows)} ads",
        extra={"row_count": len(rows), "duration_ms": duration_ms},
    )
    return 200, rows
