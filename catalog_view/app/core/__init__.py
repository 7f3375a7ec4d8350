"""Configuration, logging, error types and template rendering."""
