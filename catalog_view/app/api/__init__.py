"""
Page routes.

The ``router`` module assembles the endpoint routers; the application
factory in ``main`` includes it.  Routes are registered explicitly on
the router, never on a global registry.
"""
