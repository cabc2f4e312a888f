"""ADSDASH — Record Gateway Route."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.connectors.backend.base import AdStore
from app.connectors.backend.factory import get_store
from app.gateway.service import fetch_all_ads


router = APIRouter(prefix="/api", tags=["Ads"])


@router.get("/fetchallAds")
async def fetch_all_ads_route(store: AdStore = Depends(get_store)):
    """Return the 200 most recent ads, newest first.

    Errors come back as `{"error": message}` with status 500.
    """
    status_code, payload = await fetch_all_ads(store)
    return JSONResponse(content=payload, status_code=status_code)
