"""ADSDASH — Direct SQL Store (SQLModel)."""

from typing import Any, Dict, List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.connectors.backend.base import AdStore, StoreQueryError
from app.models.ad_models import AdRow
from app.core.logging import get_logger

logger = get_logger("backend.sql")


def _driver_message(exc: SQLAlchemyError) -> str:
    """Prefer the DB-API driver's own message over SQLAlchemy's wrapper text."""
    orig = getattr(exc, "orig", None)
    if orig is not None and str(orig):
        return str(orig)
    return str(exc)


class SQLAdStore(AdStore):
    """Reads the ads table over a direct database connection."""

    def __init__(self, engine: Engine | None = None):
        if engine is None:
            from app.database import engine as default_engine

            engine = default_engine
        self.engine = engine

    async def fetch_latest(self, limit: int) -> List[Dict[str, Any]]:
        query = (
            select(AdRow)
            .order_by(AdRow.created_at.desc())  # type: ignore
            .limit(limit)
        )
        try:
            with Session(self.engine) as session:
                rows = session.exec(query).all()
        except SQLAlchemyError as e:
            message = _driver_message(e)
            logger.warning(f"SQL query on ads table failed: {message}")
            raise StoreQueryError(message) from e

        return [row.to_record() for row in rows]
