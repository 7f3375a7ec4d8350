"""
Catalog page: the vehicle list with free‑text search.

``GET /?q=<text>`` lists every vehicle whose name, category or
manufacturer contains ``q`` (case insensitive).  Without ``q`` the
whole catalog is shown in upstream order.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from catalog_view.app.api.deps import get_catalog_service, render_page
from catalog_view.app.core.exceptions import FetchError
from catalog_view.app.services.catalog_service import CatalogService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def catalog_page(
    q: str = Query("", description="Free-text filter on name, category or manufacturer"),
    service: CatalogService = Depends(get_catalog_service),
) -> HTMLResponse:
    """Render the catalog, filtered by ``q`` when given.

    The vehicle list is required; categories and manufacturers are
    not, and the page still renders (with unresolved names) when they
    cannot be fetched.
    """
    try:
        page = service.search(q)
    except FetchError as e:
        logger.error("Error fetching cars: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load cars. Is the catalog API running?",
        ) from e
    return render_page(
        "index.html",
        {
            "cars": page.vehicles,
            "query": page.query,
            "categories": page.lookups.categories,
            "manufacturers": page.lookups.manufacturers,
            "failures": page.lookups.failures,
        },
    )
