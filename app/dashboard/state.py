"""ADSDASH — Dashboard state and pure derivations.

All derived data (filtered list, page slice, page count, dropdown options)
is computed from a `DashboardState` by the functions below; nothing here
mutates state.
"""

import math
from typing import List

from pydantic import BaseModel

from app.models.ad_models import Ad

ALL_CATEGORIES = "ALL"
PAGE_SIZE = 20


class DashboardState(BaseModel):
    """Everything the dashboard page holds between interactions."""

    ads: List[Ad] = []
    filtered_ads: List[Ad] = []
    selected_category: str = ALL_CATEGORIES
    search_term: str = ""
    current_page: int = 1
    is_category_dropdown_open: bool = False
    page_size: int = PAGE_SIZE
    loaded: bool = False


class PageView(BaseModel):
    """What the table and its controls render for the current state."""

    rows: List[Ad]
    current_page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    category_options: List[str]
    selected_category: str
    search_term: str
    is_category_dropdown_open: bool
    total_count: int
    filtered_count: int


def matches(ad: Ad, category: str, search_term: str) -> bool:
    """Category predicate AND case-insensitive description search."""
    matches_category = category == ALL_CATEGORIES or ad.CTA == category
    matches_search = (
        search_term == "" or search_term.lower() in ad.description.lower()
    )
    return matches_category and matches_search


def derive_filtered(state: DashboardState) -> List[Ad]:
    return [
        ad
        for ad in state.ads
        if matches(ad, state.selected_category, state.search_term)
    ]


def derive_total_pages(count: int, page_size: int) -> int:
    """At least one page, even for an empty list."""
    return max(1, math.ceil(count / page_size))


def derive_page(state: DashboardState) -> List[Ad]:
    start = (state.current_page - 1) * state.page_size
    return state.filtered_ads[start : start + state.page_size]


def derive_category_options(ads: List[Ad]) -> List[str]:
    """The "ALL" sentinel, then each distinct CTA in first-seen order."""
    return list(dict.fromkeys([ALL_CATEGORIES, *(ad.CTA for ad in ads)]))


def build_view(state: DashboardState) -> PageView:
    total_pages = derive_total_pages(len(state.filtered_ads), state.page_size)
    return PageView(
        rows=derive_page(state),
        current_page=state.current_page,
        total_pages=total_pages,
        has_previous=state.current_page > 1,
        has_next=state.current_page < total_pages,
        category_options=derive_category_options(state.ads),
        selected_category=state.selected_category,
        search_term=state.search_term,
        is_category_dropdown_open=state.is_category_dropdown_open,
        total_count=len(state.ads),
        filtered_count=len(state.filtered_ads),
    )
