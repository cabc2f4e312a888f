"""ADSDASH — Dashboard Controller.

Owns one `DashboardState` and is the only thing that mutates it. Every
transition reports which fields it changed; `_on_change` recomputes the
filtered list (and returns to page 1) whenever a filter trigger is among them.
"""

from typing import Any, Awaitable, Callable, Optional

from app.config import settings
from app.dashboard.normalize import normalize_ad, sort_ads
from app.dashboard.state import (
    DashboardState,
    PageView,
    build_view,
    derive_filtered,
    derive_total_pages,
)
from app.core.logging import get_logger

logger = get_logger("dashboard")

# Fields whose change invalidates the filtered list
FILTER_TRIGGERS = frozenset({"ads", "selected_category", "search_term"})

Fetcher = Callable[[], Awaitable[tuple[int, Any]]]


class Dashboard:
    """The ads page: load once, then filter and paginate in memory."""

    def __init__(self, page_size: Optional[int] = None):
        self.state = DashboardState(page_size=page_size or settings.page_size)

    # ── Load ──

    async def load(self, fetcher: Fetcher) -> None:
        """Fetch from the gateway once. Failures are logged, never raised."""
        if self.state.loaded:
            return
        try:
            status_code, payload = await fetcher()
        except Exception as e:
            self.state.loaded = True
            logger.error(f"Error fetching ads: {e!r}")
            return
        self.receive(status_code, payload)

    def receive(self, status_code: int, payload: Any) -> None:
        """Apply a gateway response to the page."""
        self.state.loaded = True

        if not 200 <= status_code < 300:
            error = payload.get("error") if isinstance(payload, dict) else payload
            logger.error(
                f"Error fetching ads: {error}", extra={"status_code": status_code}
            )
            return
        if not isinstance(payload, list):
            logger.error(
                f"Error fetching ads: expected a list, got {type(payload).__name__}"
            )
            return

        try:
            ads = sort_ads([normalize_ad(row) for row in payload])
        except Exception as e:
            logger.error(f"Error fetching ads: malformed row ({e!r})")
            return

        self._update(ads=ads)
        logger.info(
            f"Fetch of latest {len(ads)} ads just completed",
            extra={"row_count": len(ads)},
        )

    # ── Transitions ──

    def select_category(self, category: str) -> None:
        self._update(
            selected_category=category,
            current_page=1,
            is_category_dropdown_open=False,
        )

    def set_search_term(self, term: str) -> None:
        self._update(search_term=term)

    def toggle_category_dropdown(self) -> None:
        self._update(is_category_dropdown_open=not self.state.is_category_dropdown_open)

    def previous_page(self) -> None:
        if self.state.current_page > 1:
            self._update(current_page=self.state.current_page - 1)

    def next_page(self) -> None:
        if self.state.current_page < self.total_pages:
            self._update(current_page=self.state.current_page + 1)

    def go_to_page(self, page: int) -> None:
        """Jump to `page`, clamped to the valid range."""
        self._update(current_page=min(max(1, page), self.total_pages))

    # ── Derived ──

    @property
    def total_pages(self) -> int:
        return derive_total_pages(len(self.state.filtered_ads), self.state.page_size)

    def view(self) -> PageView:
        return build_view(self.state)

    # ── Internals ──

    def _update(self, **changes: Any) -> None:
        for field, value in changes.items():
            setattr(self.state, field, value)
        self._on_change(frozenset(changes))

    def _on_change(self, changed: frozenset) -> None:
        if changed & FILTER_TRIGGERS:
            self.state.filtered_ads = derive_filtered(self.state)
            self.state.current_page = 1
