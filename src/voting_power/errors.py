from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a game description or method selector is malformed."""
