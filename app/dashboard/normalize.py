"""ADSDASH — Record normalization and default ordering."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.models.ad_models import Ad, DEFAULT_TAG, NOT_AVAILABLE

# wire key → fallback used when the value is missing or falsy
FALLBACKS = {
    "video_link": NOT_AVAILABLE,
    "image_link": NOT_AVAILABLE,
    "URL": NOT_AVAILABLE,
    "CTA": NOT_AVAILABLE,
    "Start_Date": NOT_AVAILABLE,
    "tag": DEFAULT_TAG,
    "created_at": NOT_AVAILABLE,
}


def _text(value: Any, fallback: str) -> str:
    if not value:
        return fallback
    return value if isinstance(value, str) else str(value)


def normalize_ad(raw: Dict[str, Any]) -> Ad:
    """Apply sentinel fallbacks to one gateway row."""
    fields = {key: _text(raw.get(key), fallback) for key, fallback in FALLBACKS.items()}
    return Ad(
        id=str(raw.get("id", "")),
        description=_text(raw.get("description"), ""),
        **fields,
    )


def parse_created_at(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Returns None for the "N/A" sentinel and anything else unparseable.
    Timestamps without an offset are taken as UTC.
    """
    if not value or value == NOT_AVAILABLE:
        return None
    candidate = value.strip()
    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(ad: Ad) -> tuple[bool, float]:
    parsed = parse_created_at(ad.created_at)
    if parsed is None:
        return True, 0.0
    return False, -parsed.timestamp()


def sort_ads(ads: List[Ad]) -> List[Ad]:
    """Newest first; rows with an unparseable created_at go last, in input order."""
    return sorted(ads, key=_sort_key)
