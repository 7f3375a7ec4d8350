"""
Shared dependencies for the page routes.

``get_catalog_api`` gives each request its own upstream client (and
``requests.Session``) and closes it once the response is sent; tests
replace it through ``app.dependency_overrides``.  ``render_page``
turns a template and its data into an HTML response, mapping render
failures to a plain 500.
"""

from typing import Any, Iterator, Mapping

from fastapi import Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from catalog_view.app.clients.catalog_api import CatalogAPI
from catalog_view.app.core.config import settings
from catalog_view.app.core.exceptions import RenderError
from catalog_view.app.core.rendering import render
from catalog_view.app.services.catalog_service import CatalogService


def get_catalog_api() -> Iterator[CatalogAPI]:
    # One session per request: sessions are not shared across threadpool workers.
    api = CatalogAPI(base_url=settings.catalog_api_url)
    try:
        yield api
    finally:
        api.close()


def get_catalog_service(api: CatalogAPI = Depends(get_catalog_api)) -> CatalogService:
    return CatalogService(api)


def render_page(template_name: str, data: Mapping[str, Any]) -> HTMLResponse:
    """Render ``template_name`` into an HTML response.

    Raises ``HTTPException(500)`` if rendering fails.
    """
    try:
        body = render(template_name, data)
    except RenderError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Template error"
        ) from e
    return HTMLResponse(content=body)
