"""
Result containers shared by the services and the page routes.

A :class:`PartialResult` is returned wherever a handler tolerates some
upstream failures: the successful items and the failures travel
together so callers can render what they have and still see what went
wrong.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List, TypeVar

from .vehicle import Vehicle


T = TypeVar("T")


@dataclass
class FetchFailure:
    """One upstream read that did not succeed.

    Attributes:
        source: What was being fetched, e.g. ``"categories"`` or
            ``"vehicle 42"``.
        message: Human readable cause.
    """

    source: str
    message: str


@dataclass
class PartialResult(Generic[T]):
    items: List[T] = field(default_factory=list)
    failures: List[FetchFailure] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failures


@dataclass
class LookupMaps:
    """Identifier to name maps for categories and manufacturers."""

    categories: Dict[int, str] = field(default_factory=dict)
    manufacturers: Dict[int, str] = field(default_factory=dict)
    failures: List[FetchFailure] = field(default_factory=list)

    def category_name(self, category_id: int) -> str:
        return self.categories.get(category_id, "")

    def manufacturer_name(self, manufacturer_id: int) -> str:
        return self.manufacturers.get(manufacturer_id, "")


@dataclass
class CatalogPage:
    vehicles: List[Vehicle]
    query: str
    lookups: LookupMaps


@dataclass
class DetailsPage:
    vehicle: Vehicle
    related: List[Vehicle]
    failures: List[FetchFailure] = field(default_factory=list)
