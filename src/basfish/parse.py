"""Parsers for the textual dumps produced by the bash runner.

Parsing is lenient: records that do not have the expected shape are skipped,
never reported as errors.
"""

from __future__ import annotations

import logging
import shlex

from .models import AliasEntry, RawDump, Snapshot, normalize_framing

logger = logging.getLogger(__name__)

_ALIAS_PREFIX = "alias "
_DECLARE_PREFIX = "declare -"


def parse_environment(text: str, framing: str = "lines") -> dict[str, str]:
    """Parse an ``env`` dump into a name -> value mapping.

    Args:
        text: Output of ``env`` (``lines``) or ``env -0`` (``nul``).
        framing: How records are delimited.

    Notes:
        With ``lines`` framing a value containing a newline is cut at the
        newline and the continuation lines are dropped (they carry no ``=``
        or produce a bogus name). ``nul`` framing has no such limitation.
    """

    separator = "\0" if normalize_framing(framing) == "nul" else "\n"
    env: dict[str, str] = {}
    for record in text.split(separator):
        if not record:
            continue
        name, sep, value = record.partition("=")
        if not sep or not name:
            logger.debug("Skipping malformed environment record: %r", record[:80])
            continue
        env[name] = value
    return env


def _unquote(raw: str) -> str | None:
    try:
        words = shlex.split(raw, posix=True)
    except ValueError:
        return None
    if len(words) != 1:
        return None
    return words[0]


def parse_aliases(text: str) -> tuple[AliasEntry, ...]:
    """Parse the output of bash's ``alias`` builtin.

    Each line looks like ``alias ll='ls -la'``. Values are decoded with POSIX
    quoting rules, so bash's ``'it'\\''s'`` form yields ``it's``. When a name
    appears twice the last definition wins.
    """

    aliases: dict[str, str] = {}
    for line in text.splitlines():
        if not line.startswith(_ALIAS_PREFIX):
            continue
        head, sep, raw_value = line.partition("=")
        name = head[len(_ALIAS_PREFIX) :].strip()
        if not sep or not name:
            logger.debug("Skipping malformed alias line: %r", line)
            continue
        value = _unquote(raw_value)
        if value is None:
            logger.debug("Skipping alias with undecodable value: %r", line)
            continue
        aliases[name] = value
    return tuple(AliasEntry(name=name, value=value) for name, value in aliases.items())


def parse_functions(text: str) -> frozenset[str]:
    """Parse function names, one per line.

    Accepts bare names as well as ``declare -F`` output, whatever attribute
    flags it carries (``declare -f name``, ``declare -frx name``).
    """

    names: set[str] = set()
    for line in text.splitlines():
        line = line.strip()
        if line.startswith(_DECLARE_PREFIX):
            line = line.split()[-1]
        if line:
            names.add(line)
    return frozenset(names)


def parse_snapshot(dump: RawDump) -> Snapshot:
    return Snapshot(
        environment=parse_environment(dump.environment, dump.framing),
        aliases=parse_aliases(dump.aliases),
        functions=parse_functions(dump.functions),
    )
