from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Set
from dataclasses import dataclass

from .events import (
    AliasDeclared,
    EnvironmentOp,
    FunctionAdded,
    FunctionOp,
    FunctionRemoved,
    VariableAdded,
    VariableRemoved,
    VariableUpdated,
)
from .filters import is_suppressed as default_is_suppressed
from .models import AliasEntry, Snapshot


@dataclass(frozen=True, slots=True)
class SnapshotDiff:
    environment: list[EnvironmentOp]
    aliases: list[AliasDeclared]
    functions: list[FunctionOp]


def diff_environment(
    baseline: Mapping[str, str],
    post: Mapping[str, str],
    *,
    is_suppressed: Callable[[str], bool] = default_is_suppressed,
) -> list[EnvironmentOp]:
    """Diff two environment maps.

    Args:
        baseline: Environment before the command ran.
        post: Environment after the command ran.
        is_suppressed: Names for which additions and updates are dropped.

    Returns:
        Additions and updates sorted by name, followed by removals sorted by
        name.

    Notes:
        Removals ignore ``is_suppressed``. This asymmetry is surprising but
        intentional: a variable that disappears is always reported, even one
        that would never be reported as added.
    """

    changes: list[EnvironmentOp] = []
    for name in sorted(post):
        if is_suppressed(name):
            continue
        value = post[name]
        if name not in baseline:
            changes.append(VariableAdded(name=name, value=value))
        elif baseline[name] != value:
            changes.append(VariableUpdated(name=name, old=baseline[name], new=value))

    removals: list[EnvironmentOp] = [
        VariableRemoved(name=name) for name in sorted(set(baseline) - set(post))
    ]
    return changes + removals


def declared_aliases(post: Iterable[AliasEntry]) -> list[AliasDeclared]:
    """Every alias of the post snapshot, sorted by name."""

    by_name = {entry.name: entry.value for entry in post}
    return [AliasDeclared(name=name, value=by_name[name]) for name in sorted(by_name)]


def diff_functions(baseline: Set[str], post: Set[str]) -> list[FunctionOp]:
    """Diff function presence. Bodies are not compared."""

    ops: list[FunctionOp] = []
    for name in sorted(post - baseline):
        ops.append(FunctionAdded(name=name))
    for name in sorted(baseline - post):
        ops.append(FunctionRemoved(name=name))
    return ops


def diff_snapshots(
    baseline: Snapshot,
    post: Snapshot,
    *,
    is_suppressed: Callable[[str], bool] = default_is_suppressed,
) -> SnapshotDiff:
    return SnapshotDiff(
        environment=diff_environment(
            baseline.environment, post.environment, is_suppressed=is_suppressed
        ),
        aliases=declared_aliases(post.aliases),
        functions=diff_functions(baseline.functions, post.functions),
    )
