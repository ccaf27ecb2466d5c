"""Node identifier normalization.

Identifiers are case-sensitive strings trimmed of surrounding whitespace.
An identifier that is empty after trimming is not a valid node id.
"""

from __future__ import annotations

from ..exceptions import InvalidIdentifierError


def normalize_identifier(raw: str | None) -> str | None:
    """Return the trimmed identifier, or None if nothing is left."""
    if raw is None:
        return None
    node_id = str(raw).strip()
    return node_id or None


def validate_identifier(raw: str | None) -> str:
    """Return the trimmed identifier.

    Raises:
        InvalidIdentifierError: If *raw* is None, empty or whitespace-only.
    """
    node_id = normalize_identifier(raw)
    if node_id is None:
        raise InvalidIdentifierError("node id cannot be empty")
    return node_id


__all__ = ["normalize_identifier", "validate_identifier"]
