"""
Details page: one vehicle and up to three related vehicles.

Related vehicles are the first ones in the upstream list that share
the vehicle's category.  If the list cannot be fetched the page is
rendered without them.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from catalog_view.app.api.deps import get_catalog_service, render_page
from catalog_view.app.core.exceptions import BadRequestError, NotFoundError
from catalog_view.app.services.catalog_service import CatalogService, parse_vehicle_id


router = APIRouter()


@router.get("/car", response_class=HTMLResponse)
def details_page(
    raw_id: Optional[str] = Query(None, alias="id"),
    service: CatalogService = Depends(get_catalog_service),
) -> HTMLResponse:
    """Render a single vehicle with recommendations.

    Returns 400 for a missing or non‑numeric ``id`` and 404 when the
    vehicle cannot be fetched for any reason.
    """
    try:
        vehicle_id = parse_vehicle_id(raw_id)
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    try:
        page = service.vehicle_details(vehicle_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Car not found") from e
    return render_page("details.html", {"car": page.vehicle, "related": page.related})
