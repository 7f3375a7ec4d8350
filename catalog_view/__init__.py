"""
Catalog View Service.

A server-rendered front end over an upstream vehicle catalog API.  The
web application, its upstream client and the page logic live under
``catalog_view.app``; run it with ``python run.py``.
"""

__all__ = []
