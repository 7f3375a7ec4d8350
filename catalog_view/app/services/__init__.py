"""
Service layer abstraction.

Services hold the catalog logic between the page routes and the
upstream API client, so routes only translate parameters and errors.
"""
