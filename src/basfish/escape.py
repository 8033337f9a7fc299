from __future__ import annotations


def escape(value: str) -> str:
    """Render ``value`` as a double-quoted fish string literal.

    Backslash goes first so the escapes added for ``"`` and ``$`` are not
    doubled. The result always carries its own quotes.
    """

    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
    return f'"{escaped}"'
