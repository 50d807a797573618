"""Naming policies shared by people and category labels."""


def normalize_label(value: str | None) -> str:
    """Trim surrounding whitespace from a user-supplied label.

    Args:
        value: Raw name or description.

    Returns:
        str: Trimmed label, empty when nothing usable was supplied.
    """
    if not value:
        return ""
    return value.strip()


def labels_match(left: str, right: str) -> bool:
    """Return True when two labels are equal ignoring case and padding."""
    return normalize_label(left).lower() == normalize_label(right).lower()


__all__ = ["normalize_label", "labels_match"]
