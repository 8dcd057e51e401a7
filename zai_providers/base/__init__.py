"""Shared provider layer: models, errors, logging, HTTP, retry, formats and the adapter."""
