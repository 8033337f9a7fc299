"""Render diff operations as fish statements."""

from __future__ import annotations

from collections.abc import Iterable

from .diff import SnapshotDiff
from .escape import escape
from .events import (
    AliasDeclared,
    EnvironmentOp,
    FunctionAdded,
    FunctionOp,
    VariableAdded,
    VariableRemoved,
    VariableUpdated,
)


def _comment_text(value: str) -> str:
    # A raw newline would end the comment and turn the rest into code.
    return value.replace("\r", "\\r").replace("\n", "\\n")


def _assign(name: str, value: str) -> str:
    if name == "PWD":
        return f"cd {escape(value)}"
    return f"set -g -x {name} {escape(value)}"


def emit_environment(ops: Iterable[EnvironmentOp]) -> list[str]:
    lines: list[str] = []
    for op in ops:
        if isinstance(op, VariableAdded):
            lines.append(f"# Adding {op.name}")
            lines.append(_assign(op.name, op.value))
        elif isinstance(op, VariableUpdated):
            lines.append(
                f"# Updating {op.name}: "
                f"'{_comment_text(op.old)}' -> '{_comment_text(op.new)}'"
            )
            lines.append(_assign(op.name, op.new))
        elif isinstance(op, VariableRemoved):
            lines.append(f"# Removing {op.name}")
            lines.append(f"set -e {op.name}")
    return lines


def emit_aliases(ops: Iterable[AliasDeclared]) -> list[str]:
    return [f"alias {op.name} {escape(op.value)}" for op in ops]


def emit_functions(ops: Iterable[FunctionOp]) -> list[str]:
    """Describe function changes.

    Function bodies are never transplanted, so these are comments only.
    """

    lines: list[str] = []
    for op in ops:
        if isinstance(op, FunctionAdded):
            lines.append(f"# Function added: {op.name} (body not transplanted)")
        else:
            lines.append(f"# Function removed: {op.name} (not erased)")
    return lines


def render_script(diff: SnapshotDiff) -> str:
    """Join the environment, alias and function sections, in that order.

    Empty sections are left out entirely.
    """

    sections = [
        emit_environment(diff.environment),
        emit_aliases(diff.aliases),
        emit_functions(diff.functions),
    ]
    return "\n".join("\n".join(lines) for lines in sections if lines)
