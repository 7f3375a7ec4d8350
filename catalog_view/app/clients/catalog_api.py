"""Catalog API client.

This module defines a small client wrapper around the upstream vehicle
catalog REST API.  The client uses the ``requests`` library internally
to make HTTP calls and decodes the JSON bodies into the pydantic
records from :mod:`catalog_view.app.schemas`.

The client exposes one method per upstream resource:

* :meth:`list_vehicles` – ``GET /models``.
* :meth:`list_categories` – ``GET /categories``.
* :meth:`list_manufacturers` – ``GET /manufacturers``.
* :meth:`get_vehicle` – ``GET /models/{id}``.

Every call is a single synchronous round trip.  There is no caching
and no retry; failures are raised as subclasses of
:class:`~catalog_view.app.core.exceptions.FetchError` and it is up to
the caller to decide whether a failure is fatal.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..core.exceptions import DecodeError, NotFoundError, TransportError, UpstreamStatusError
from ..schemas.reference import Category, Manufacturer
from ..schemas.vehicle import Vehicle


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class CatalogAPI:
    """Client for reading the upstream vehicle catalog."""

    # Resource paths relative to the base URL.
    _PATHS: Dict[str, str] = {
        "vehicles": "/models",
        "vehicle": "/models/{id}",
        "categories": "/categories",
        "manufacturers": "/manufacturers",
    }

    def __init__(self, *, base_url: str, session: Optional[requests.Session] = None) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://127.0.0.1:3000/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def close(self) -> None:
        """Release the pooled connections held by the session."""
        self.session.close()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _get_json(self, path: str) -> Any:
        """Perform a GET request and return the decoded JSON body.

        Raises:
            TransportError: The request could not be sent or no response
                arrived.
            UpstreamStatusError: The API answered with a non-2xx status.
            DecodeError: The body is not valid JSON.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("API request to %s failed with status %s", url, status)
            raise UpstreamStatusError(f"API returned status: {status}", status_code=status) from exc
        except requests.RequestException as exc:
            logger.error("API request to %s failed: %s", url, exc)
            raise TransportError(str(exc)) from exc
        try:
            return response.json()
        except ValueError as exc:
            logger.error("API response from %s is not valid JSON: %s", url, exc)
            raise DecodeError(f"Invalid JSON from {url}") from exc

    def _get_list(self, path: str, model: Type[ModelT]) -> List[ModelT]:
        data = self._get_json(path)
        if not isinstance(data, list):
            raise DecodeError(f"Expected a JSON array from {path}, got {type(data).__name__}")
        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as exc:
            logger.error("Unexpected %s payload from %s: %s", model.__name__, path, exc)
            raise DecodeError(f"Unexpected {model.__name__} payload from {path}") from exc

    # ------------------------------------------------------------------
    # Collection reads
    # ------------------------------------------------------------------
    def list_vehicles(self) -> List[Vehicle]:
        """Retrieve every vehicle, in upstream order."""
        return self._get_list(self._PATHS["vehicles"], Vehicle)

    def list_categories(self) -> List[Category]:
        """Retrieve every category."""
        return self._get_list(self._PATHS["categories"], Category)

    def list_manufacturers(self) -> List[Manufacturer]:
        """Retrieve every manufacturer."""
        return self._get_list(self._PATHS["manufacturers"], Manufacturer)

    # ------------------------------------------------------------------
    # Single reads
    # ------------------------------------------------------------------
    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        """Retrieve a single vehicle by ID.

        Args:
            vehicle_id: Identifier of the vehicle.
        Raises:
            NotFoundError: The API answered with a non-success status.
            TransportError: The API could not be reached.
            DecodeError: The body is not a vehicle object.
        """
        path = self._PATHS["vehicle"].replace("{id}", str(vehicle_id))
        try:
            data = self._get_json(path)
        except UpstreamStatusError as exc:
            raise NotFoundError(f"Vehicle {vehicle_id} not found", status_code=exc.status_code) from exc
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object from {path}, got {type(data).__name__}")
        try:
            return Vehicle.model_validate(data)
        except ValidationError as exc:
            logger.error("Unexpected vehicle payload from %s: %s", path, exc)
            raise DecodeError(f"Unexpected vehicle payload from {path}") from exc
