from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


_FRAMINGS: tuple[str, ...] = ("nul", "lines")


def normalize_framing(value: str) -> str:
    """Parse an environment framing name.

    Args:
        value: ``nul`` (``env -0`` output) or ``lines`` (plain ``env``).
            Case and surrounding whitespace are ignored.

    Raises:
        ValueError: If the framing is not recognized.
    """

    framing = value.strip().lower()
    if framing not in _FRAMINGS:
        raise ValueError(f"Unknown framing: {value!r}")
    return framing


@dataclass(frozen=True, slots=True)
class AliasEntry:
    """One alias; ``value`` is the replacement text with bash quoting removed."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class RawDump:
    """Textual state dumps produced by one shell capture.

    Notes:
        ``environment`` is framed according to ``framing``. The alias and
        function blocks are always newline-delimited.
    """

    environment: str
    aliases: str
    functions: str
    returncode: int = 0
    framing: str = "nul"


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Shell state at one instant.

    The environment holds every exported variable, including the ones the
    diff later suppresses.
    """

    environment: Mapping[str, str] = field(default_factory=dict)
    aliases: tuple[AliasEntry, ...] = ()
    functions: frozenset[str] = frozenset()
