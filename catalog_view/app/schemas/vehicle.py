"""
Pydantic models for vehicle data.

``Vehicle`` mirrors the JSON object returned by ``GET /models`` and
``GET /models/{id}``.  Missing or ``null`` fields fall back to zero values;
a field of the wrong type is a validation error, which the fetch layer
reports as a decode failure.
"""

from pydantic import Field

from .base import UpstreamModel


class Specification(UpstreamModel):
    engine: str = Field("", example="3.0L Twin-Turbo I6")
    horsepower: int = Field(0, example=503)
    transmission: str = Field("", example="8-speed automatic")
    drivetrain: str = Field("", example="AWD")


class Vehicle(UpstreamModel):
    """A vehicle as served by the upstream catalog API."""

    id: int = Field(0, example=1)
    name: str = Field("", example="M3 Competition")
    manufacturer_id: int = Field(0, alias="manufacturerId", example=5)
    category_id: int = Field(0, alias="categoryId", example=10)
    year: int = Field(0, example=2023)
    specifications: Specification = Field(default_factory=Specification)
    image: str = Field("", example="bmw_m3.jpg")
