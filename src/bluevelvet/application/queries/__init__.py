"""Queries - read-only operations."""
