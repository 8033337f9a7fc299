from __future__ import annotations

from typing import Protocol

from .models import RawDump


class ShellRunner(Protocol):
    """Port interface for the process that evaluates source-shell commands."""

    def capture(self, command: str) -> RawDump:
        """Evaluate ``command`` and dump the resulting shell state.

        An empty command captures the baseline state.
        """

    def name(self) -> str:
        """Human-readable runner name (for logging)."""
