"""User-facing interfaces."""

__all__ = []
