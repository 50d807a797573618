"""HTTP adapter built on FastAPI."""

from household_ledger.adapters.api.app import create_app

__all__ = ["create_app"]
