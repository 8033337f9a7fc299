from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .models import normalize_framing

_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings.

    Attributes:
        shell: Source shell executable.
        framing: Environment dump framing, ``nul`` or ``lines``.
        ignore: Extra variable names to keep out of the script.
        log_level: Level for the ``basfish`` logger.
    """

    shell: str = "bash"
    framing: str = "nul"
    ignore: tuple[str, ...] = ()
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``BASFISH_*`` variables.

        Raises:
            ValueError: If ``BASFISH_FRAMING`` or ``BASFISH_LOG_LEVEL`` is not
                recognized.
        """

        env = os.environ if environ is None else environ
        defaults = cls()
        ignore = tuple(
            name.strip() for name in env.get("BASFISH_IGNORE", "").split(",") if name.strip()
        )
        level = env.get("BASFISH_LOG_LEVEL", defaults.log_level).strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        return cls(
            shell=env.get("BASFISH_SHELL", defaults.shell),
            framing=normalize_framing(env.get("BASFISH_FRAMING", defaults.framing)),
            ignore=ignore,
            log_level=level,
        )


def configure_logging(level: str) -> None:
    """Send ``basfish`` log records to stderr; stdout carries the script."""

    logger = logging.getLogger("basfish")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("basfish: %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
