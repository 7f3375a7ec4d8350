"""
Pytest fixtures for the catalog view tests.

Provides:
- Sample upstream records (vehicles, categories, manufacturers)
- ``FakeCatalogAPI``, an in-memory stand-in for the upstream client
  whose individual reads can be made to fail
- A ``TestClient`` with the upstream client dependency overridden
- ``make_response`` for building ``requests.Response`` objects
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import pytest
import requests
from fastapi.testclient import TestClient

from catalog_view.app.api.deps import get_catalog_api
from catalog_view.app.core.exceptions import NotFoundError, TransportError
from catalog_view.app.main import app
from catalog_view.app.schemas.reference import Category, Manufacturer
from catalog_view.app.schemas.vehicle import Vehicle


# =============================================================================
# Sample data
# =============================================================================

VEHICLE_PAYLOADS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Model X",
        "manufacturerId": 5,
        "categoryId": 10,
        "year": 2022,
        "specifications": {
            "engine": "Dual Motor",
            "horsepower": 670,
            "transmission": "Single-speed",
            "drivetrain": "AWD",
        },
        "image": "model_x.jpg",
    },
    {
        "id": 2,
        "name": "Model Y",
        "manufacturerId": 6,
        "categoryId": 10,
        "year": 2023,
        "specifications": {
            "engine": "Single Motor",
            "horsepower": 299,
            "transmission": "Single-speed",
            "drivetrain": "RWD",
        },
        "image": "model_y.jpg",
    },
    {
        "id": 3,
        "name": "Other",
        "manufacturerId": 5,
        "categoryId": 20,
        "year": 2020,
        "specifications": {
            "engine": "2.0L I4",
            "horsepower": 255,
            "transmission": "6-speed manual",
            "drivetrain": "FWD",
        },
        "image": "other.jpg",
    },
]

CATEGORY_PAYLOADS = [{"id": 10, "name": "SUV"}, {"id": 20, "name": "Hatchback"}]
MANUFACTURER_PAYLOADS = [{"id": 5, "name": "Tesla"}, {"id": 6, "name": "Volkswagen"}]


class FakeCatalogAPI:
    """In-memory catalog with the same read methods as ``CatalogAPI``.

    ``fail`` names the reads that should raise, e.g. ``{"categories"}``
    or ``{"vehicle:2"}``.
    """

    def __init__(
        self,
        vehicles: Optional[List[Vehicle]] = None,
        categories: Optional[List[Category]] = None,
        manufacturers: Optional[List[Manufacturer]] = None,
        fail: Optional[set] = None,
    ) -> None:
        self.vehicles = vehicles if vehicles is not None else [Vehicle.model_validate(v) for v in VEHICLE_PAYLOADS]
        self.categories = categories if categories is not None else [Category.model_validate(c) for c in CATEGORY_PAYLOADS]
        self.manufacturers = (
            manufacturers if manufacturers is not None else [Manufacturer.model_validate(m) for m in MANUFACTURER_PAYLOADS]
        )
        self.fail = fail or set()
        self.calls: List[str] = []

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail:
            raise TransportError(f"{name} unavailable")

    def list_vehicles(self) -> List[Vehicle]:
        self._check("vehicles")
        return list(self.vehicles)

    def list_categories(self) -> List[Category]:
        self._check("categories")
        return list(self.categories)

    def list_manufacturers(self) -> List[Manufacturer]:
        self._check("manufacturers")
        return list(self.manufacturers)

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        self._check(f"vehicle:{vehicle_id}")
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        raise NotFoundError(f"Vehicle {vehicle_id} not found", status_code=404)


def make_response(status_code: int = 200, body: Any = None, *, raw: Optional[bytes] = None, url: str = "") -> requests.Response:
    """Build a ``requests.Response`` carrying ``body`` as JSON (or ``raw`` bytes)."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fake_api() -> FakeCatalogAPI:
    return FakeCatalogAPI()


@pytest.fixture
def vehicles(fake_api: FakeCatalogAPI) -> List[Vehicle]:
    return fake_api.vehicles


@pytest.fixture
def client(fake_api: FakeCatalogAPI):
    """Test client whose upstream reads are served by ``fake_api``."""
    app.dependency_overrides[get_catalog_api] = lambda: fake_api
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


