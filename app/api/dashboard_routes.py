"""ADSDASH — Dashboard Page Route.

Each request is one page mount: load from the gateway once, replay the
interactions carried in the query string through the controller, render.
"""

from pathlib import Path
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.dashboard.controller import Dashboard, Fetcher
from app.dashboard.fetchers import get_fetcher
from app.dashboard.state import ALL_CATEGORIES, PageView
from app.dashboard.text import format_created_at, format_description, format_url
from app.models.ad_models import NOT_AVAILABLE

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["description"] = format_description
templates.env.filters["short_url"] = format_url
templates.env.filters["created_at"] = format_created_at

router = APIRouter(tags=["Dashboard"])


def page_link(view: PageView, **overrides) -> str:
    """URL for the page with the current criteria plus `overrides`."""
    params = {"category": view.selected_category, "q": view.search_term}
    params.update(overrides)
    params = {
        key: value
        for key, value in params.items()
        if value not in (None, "", 0, ALL_CATEGORIES)
    }
    return f"/?{urlencode(params)}" if params else "/"


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def dashboard_page(
    request: Request,
    category: str = Query(ALL_CATEGORIES),
    q: str = Query(""),
    menu: bool = Query(False),
    page: int = Query(1),
    fetcher: Fetcher = Depends(get_fetcher),
):
    """Serve the ads dashboard."""
    dashboard = Dashboard()
    await dashboard.load(fetcher)

    if category != ALL_CATEGORIES:
        dashboard.select_category(category)
    if q:
        dashboard.set_search_term(q)
    if menu:
        dashboard.toggle_category_dropdown()
    if page > 1:
        dashboard.go_to_page(page)

    view = dashboard.view()
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "view": view,
            "link": lambda **kw: page_link(view, **kw),
            "not_available": NOT_AVAILABLE,
            "all_categories": ALL_CATEGORIES,
        },
    )
