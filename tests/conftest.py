from datetime import datetime, timedelta, timezone

import pytest

from app.connectors.backend.base import AdStore

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class FakeStore(AdStore):
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    async def fetch_latest(self, limit):
        self.calls.append(limit)
        if self.error is not None:
            raise self.error
        return list(self.rows)[:limit]


def _row(index, **overrides):
    row = {
        "id": f"ad-{index}",
        "description": f"Ad number {index}",
        "video_link": f"https://cdn.example.com/v/{index}.mp4",
        "image_link": f"https://cdn.example.com/i/{index}.jpg",
        "URL": f"https://shop.example.com/{index}",
        "CTA": "Shop Now",
        "Start_Date": "2024-05-01",
        "tag": "retail",
        "created_at": (BASE_TIME - timedelta(minutes=index)).isoformat(),
    }
    row.update(overrides)
    return row


@pytest.fixture
def make_row():
    return _row


@pytest.fixture
def make_rows():
    def build(count, **overrides):
        return [_row(i, **overrides) for i in range(count)]

    return build


@pytest.fixture
def fake_store():
    return FakeStore
