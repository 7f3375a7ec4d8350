"""
Pydantic records for upstream API payloads.

Field names on the wire are camelCase (``manufacturerId``); the Python
attributes are snake_case and populated through aliases.
"""
