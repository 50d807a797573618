"""Domain policies package."""

from .naming import labels_match, normalize_label

__all__ = ["labels_match", "normalize_label"]
