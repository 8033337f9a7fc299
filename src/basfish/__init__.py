"""basfish: replay the side effects of a bash command in fish.

The package captures shell state before and after a bash command, diffs the
environment, alias and function namespaces, and renders the delta as a fish
script.
"""

from .diff import SnapshotDiff, diff_environment, diff_functions, diff_snapshots
from .emit import render_script
from .escape import escape
from .events import (
    AliasDeclared,
    FunctionAdded,
    FunctionRemoved,
    VariableAdded,
    VariableRemoved,
    VariableUpdated,
)
from .filters import SuppressionPolicy, is_suppressed
from .models import AliasEntry, RawDump, Snapshot
from .parse import parse_snapshot
from .runner import generate

__all__ = [
    "AliasDeclared",
    "AliasEntry",
    "FunctionAdded",
    "FunctionRemoved",
    "RawDump",
    "Snapshot",
    "SnapshotDiff",
    "SuppressionPolicy",
    "VariableAdded",
    "VariableRemoved",
    "VariableUpdated",
    "diff_environment",
    "diff_functions",
    "diff_snapshots",
    "escape",
    "generate",
    "is_suppressed",
    "parse_snapshot",
    "render_script",
]
