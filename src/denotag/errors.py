"""Exception hierarchy for denotag."""
from __future__ import annotations

from typing import Optional, Sequence


class DenoTagError(Exception):
    """Base class for every error raised by denotag."""


class BackendError(DenoTagError):
    """Raised when a run/bundle backend cannot produce its output."""

    def __init__(self, message: str, *, diagnostics: Optional[Sequence[str]] = None) -> None:
        super().__init__(message)
        self.diagnostics = list(diagnostics or [])


class UsageError(DenoTagError):
    """Raised by the CLI layer when it is invoked incorrectly."""
