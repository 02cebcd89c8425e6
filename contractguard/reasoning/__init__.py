"""Adapter between the extraction engine and the downstream reasoning service."""
