"""
Pydantic models for reference data.

Categories and manufacturers share the same ``{id, name}`` shape and
are only used to resolve the foreign keys carried by vehicles.
"""

from pydantic import Field

from .base import UpstreamModel


class ReferenceBase(UpstreamModel):
    id: int = Field(0, example=10)
    name: str = Field("", example="Sports")


class Category(ReferenceBase):
    """Vehicle category such as ``SUV`` or ``Sports``."""
    pass


class Manufacturer(ReferenceBase):
    """Vehicle manufacturer such as ``BMW``."""
    pass
