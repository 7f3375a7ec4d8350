"""
Comparison page: several vehicles side by side.

``GET /compare?id=1&id=2`` shows the requested vehicles in the order
given.  Vehicles that cannot be fetched are left out without an error.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from catalog_view.app.api.deps import get_catalog_service, render_page
from catalog_view.app.core.exceptions import BadRequestError
from catalog_view.app.services.catalog_service import CatalogService


router = APIRouter()


@router.get("/compare", response_class=HTMLResponse)
def compare_page(
    raw_ids: List[str] = Query([], alias="id"),
    service: CatalogService = Depends(get_catalog_service),
) -> HTMLResponse:
    """Render the comparison table.  At least two ``id`` values are required."""
    try:
        result = service.compare(raw_ids)
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return render_page("compare.html", {"cars": result.items, "failures": result.failures})
