"""
Application package initializer.

This package contains the web front end for the vehicle catalog.  It
is split into a fetch layer (``clients``) talking to the upstream data
API, pydantic records (``schemas``), the in‑memory filtering and
recommendation logic (``services``), and the HTML page routes
(``api``).  Nothing here owns data: every request reads fresh from
the upstream API.
"""

from .main import app  # noqa: F401
