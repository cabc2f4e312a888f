"""ADSDASH — Store selection."""

from app.config import settings
from app.connectors.backend.base import AdStore
from app.connectors.backend.postgrest import PostgrestAdStore
from app.connectors.backend.sql import SQLAdStore


def create_store() -> AdStore:
    """Build the store the current configuration points at."""
    if settings.use_rest_backend:
        return PostgrestAdStore()
    return SQLAdStore()


async def get_store():
    """Dependency — yields a store and closes it after the request."""
    store = create_store()
    try:
        yield store
    finally:
        await store.close()
