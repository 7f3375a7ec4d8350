"""HTTP clients for upstream services."""

from .catalog_api import CatalogAPI  # noqa: F401
