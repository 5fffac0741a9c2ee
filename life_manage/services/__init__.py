"""Persistence gateway and workflow callers."""
