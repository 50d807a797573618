"""Streamlit interface."""

__all__ = []
