"""API-facing models for the person service."""
