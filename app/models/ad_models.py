"""ADSDASH — Ad Record Models.

`AdRow` mirrors the hosted `ads_data` table (column names match the backend
exactly, including their case). `Ad` is the normalized display shape the
dashboard works with.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

NOT_AVAILABLE = "N/A"
DEFAULT_TAG = "other"


# ─────────────────────────────────────────────
# DATABASE MODEL — Backend table (read-only here)
# ─────────────────────────────────────────────


class AdRow(SQLModel, table=True):
    """One advertisement row as stored in the backend."""

    __tablename__ = "ads_data"

    id: str = Field(primary_key=True, description="Opaque unique identifier")
    description: Optional[str] = Field(default=None)
    video_link: Optional[str] = Field(default=None)
    image_link: Optional[str] = Field(default=None)
    URL: Optional[str] = Field(default=None, description="Landing-page URL")
    CTA: Optional[str] = Field(default=None, description="Call-to-action label")
    Start_Date: Optional[str] = Field(default=None)
    tag: Optional[str] = Field(default=None)
    created_at: Optional[datetime] = Field(
        default=None, index=True, sa_type=DateTime(timezone=True)
    )

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the gateway's wire shape (JSON-safe)."""
        return self.model_dump(mode="json")


# ─────────────────────────────────────────────
# PYDANTIC SCHEMA — Normalized display record
# ─────────────────────────────────────────────


class Ad(BaseModel):
    """A record after sentinel fallbacks have been applied."""

    id: str
    description: str = ""
    video_link: str = NOT_AVAILABLE
    image_link: str = NOT_AVAILABLE
    URL: str = NOT_AVAILABLE
    CTA: str = NOT_AVAILABLE
    Start_Date: str = NOT_AVAILABLE
    tag: str = DEFAULT_TAG
    created_at: str = NOT_AVAILABLE

    model_config = {"frozen": True}
