"""
Business logic for the catalog pages.

The functions at module level are pure: they take already fetched
records and return new lists, which keeps the search and
recommendation rules testable without an upstream API.  The
``CatalogService`` class wires them to a :class:`CatalogAPI` and
decides which upstream failures are fatal for each page.
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence

from ..clients.catalog_api import CatalogAPI
from ..core.exceptions import BadRequestError, FetchError, NotFoundError
from ..schemas.reference import Category, Manufacturer
from ..schemas.results import CatalogPage, DetailsPage, FetchFailure, LookupMaps, PartialResult
from ..schemas.vehicle import Vehicle


logger = logging.getLogger(__name__)

MAX_RELATED = 3
MIN_COMPARE = 2

# Plain ASCII decimal integers only; no whitespace, underscores or other digit scripts.
ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def build_lookup_maps(
    categories: Iterable[Category],
    manufacturers: Iterable[Manufacturer],
) -> LookupMaps:
    """Index categories and manufacturers by id."""
    return LookupMaps(
        categories={c.id: c.name for c in categories},
        manufacturers={m.id: m.name for m in manufacturers},
    )


def filter_vehicles(vehicles: Sequence[Vehicle], query: str, lookups: LookupMaps) -> List[Vehicle]:
    """Return the vehicles matching ``query``, in their original order.

    A vehicle matches when the lower‑cased query is a substring of its
    name, its category name or its manufacturer name.  An empty query
    matches everything.  References missing from ``lookups`` resolve
    to an empty name.
    """
    needle = query.lower()
    if not needle:
        return list(vehicles)
    matches: List[Vehicle] = []
    for vehicle in vehicles:
        haystacks = (
            vehicle.name.lower(),
            lookups.category_name(vehicle.category_id).lower(),
            lookups.manufacturer_name(vehicle.manufacturer_id).lower(),
        )
        if any(needle in text for text in haystacks):
            matches.append(vehicle)
    return matches


def recommend_related(vehicle: Vehicle, candidates: Iterable[Vehicle], limit: int = MAX_RELATED) -> List[Vehicle]:
    """Pick the first ``limit`` other vehicles sharing ``vehicle``'s category.

    Candidates are scanned in the order given and scanning stops as
    soon as ``limit`` matches are collected.  There is no ranking.
    """
    related: List[Vehicle] = []
    if limit <= 0:
        return related
    for candidate in candidates:
        if candidate.category_id == vehicle.category_id and candidate.id != vehicle.id:
            related.append(candidate)
            if len(related) >= limit:
                break
    return related


def to_int(raw: str) -> Optional[int]:
    """Return ``raw`` as an int, or ``None`` unless it is a plain ASCII integer."""
    if not ID_PATTERN.fullmatch(raw):
        return None
    return int(raw)


def parse_vehicle_id(raw: Optional[str]) -> int:
    """Parse a required ``id`` query parameter.

    Raises:
        BadRequestError: ``raw`` is missing, empty or not an integer.
    """
    if raw is None or raw == "":
        raise BadRequestError("ID is required")
    vehicle_id = to_int(raw)
    if vehicle_id is None:
        raise BadRequestError("Invalid ID")
    return vehicle_id


class CatalogService:
    """Orchestrates upstream reads for the three catalog pages.

    Upstream reads within one call are sequential.  The service holds
    no state besides the client, so one instance can serve concurrent
    requests.
    """

    def __init__(self, api: CatalogAPI) -> None:
        self.api = api

    def load_lookup_maps(self) -> LookupMaps:
        """Fetch categories and manufacturers, tolerating failures.

        A failed read leaves the corresponding map empty and is
        recorded in ``LookupMaps.failures``.
        """
        failures: List[FetchFailure] = []
        categories: List[Category] = []
        manufacturers: List[Manufacturer] = []
        try:
            categories = self.api.list_categories()
        except FetchError as exc:
            logger.warning("Could not fetch categories: %s", exc)
            failures.append(FetchFailure(source="categories", message=str(exc)))
        try:
            manufacturers = self.api.list_manufacturers()
        except FetchError as exc:
            logger.warning("Could not fetch manufacturers: %s", exc)
            failures.append(FetchFailure(source="manufacturers", message=str(exc)))
        lookups = build_lookup_maps(categories, manufacturers)
        lookups.failures = failures
        return lookups

    def search(self, query: str = "") -> CatalogPage:
        """Build the catalog page, optionally filtered by ``query``.

        Raises:
            FetchError: The vehicle list could not be fetched.
        """
        vehicles = self.api.list_vehicles()
        lookups = self.load_lookup_maps()
        matches = filter_vehicles(vehicles, query, lookups)
        logger.debug("Query %r matched %d of %d vehicles", query, len(matches), len(vehicles))
        return CatalogPage(vehicles=matches, query=query, lookups=lookups)

    def vehicle_details(self, vehicle_id: int) -> DetailsPage:
        """Build the details page for ``vehicle_id``.

        Raises:
            NotFoundError: The vehicle could not be fetched, whatever
                the cause.
        """
        try:
            vehicle = self.api.get_vehicle(vehicle_id)
        except NotFoundError:
            raise
        except FetchError as exc:
            raise NotFoundError(f"Vehicle {vehicle_id} not found") from exc

        failures: List[FetchFailure] = []
        related: List[Vehicle] = []
        try:
            candidates = self.api.list_vehicles()
        except FetchError as exc:
            logger.warning("Could not fetch cars for recommendations: %s", exc)
            failures.append(FetchFailure(source="vehicles", message=str(exc)))
        else:
            related = recommend_related(vehicle, candidates)
        return DetailsPage(vehicle=vehicle, related=related, failures=failures)

    def compare(self, raw_ids: Sequence[str]) -> PartialResult[Vehicle]:
        """Fetch the vehicles named by ``raw_ids`` for side‑by‑side display.

        Vehicles come back in input order.  Ids that are not integers
        or whose fetch fails are skipped and recorded as failures, so
        the result may hold fewer than two vehicles.

        Raises:
            BadRequestError: Fewer than two ids were supplied.
        """
        if len(raw_ids) < MIN_COMPARE:
            raise BadRequestError("Please select at least 2 cars to compare.")
        result: PartialResult[Vehicle] = PartialResult()
        for raw in raw_ids:
            vehicle_id = to_int(raw)
            if vehicle_id is None:
                logger.info("Skipping non-numeric compare id %r", raw)
                result.failures.append(FetchFailure(source=f"vehicle {raw}", message="Invalid ID"))
                continue
            try:
                result.items.append(self.api.get_vehicle(vehicle_id))
            except FetchError as exc:
                logger.info("Skipping vehicle %s in comparison: %s", vehicle_id, exc)
                result.failures.append(FetchFailure(source=f"vehicle {vehicle_id}", message=str(exc)))
        return result
