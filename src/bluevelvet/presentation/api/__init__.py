"""HTTP API (FastAPI)."""

from bluevelvet.presentation.api.app import create_app

__all__ = ["create_app"]
