"""Error taxonomy for a scaffolding run."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of fatal run failures."""
    CLONE = "clone"
    FILESYSTEM = "filesystem"
    CONFIG_PARSE = "config_parse"
    PATH_RESOLUTION = "path_resolution"


class ScaffoldError(Exception):
    """Raised when a run step fails irrecoverably.

    Attributes:
        kind: Which class of failure occurred.
        detail: Extra diagnostic text (stderr, decoder message, ...).
    """

    def __init__(self, kind: ErrorKind, message: str, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(message)
