"""ADSDASH — Abstract Ad Store."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class StoreQueryError(Exception):
    """Raised when the backend store reports a query error."""

    def __init__(self, message: str, status_code: int = 0):
        self.status_code = status_code
        super().__init__(message)


class AdStore(ABC):
    """Read-only access to the hosted ads table.

    Implementations issue exactly one query per call: every column,
    newest `created_at` first, capped at `limit` rows.
    """

    @abstractmethod
    async def fetch_latest(self, limit: int) -> List[Dict[str, Any]]:
        """Return up to `limit` rows ordered by `created_at` descending.

        Raises:
            StoreQueryError: the backend rejected or failed the query.
        """
        ...

    async def close(self) -> None:
        """Release any connection resources held by the store."""
        return None
