from __future__ import annotations


class NotationConfigError(ValueError):
    """Raised when annotation configuration is malformed at the API boundary."""
