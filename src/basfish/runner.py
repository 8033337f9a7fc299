from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .adapter import ShellRunner
from .bash_runner import CommandFailedError
from .diff import SnapshotDiff, diff_snapshots
from .emit import render_script
from .filters import is_suppressed as default_is_suppressed
from .models import RawDump, Snapshot
from .parse import parse_snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerateResult:
    command: str
    baseline: Snapshot
    post: Snapshot
    diff: SnapshotDiff
    script: str


def _checked(dump: RawDump, command: str) -> RawDump:
    if dump.returncode != 0:
        raise CommandFailedError(command, dump.returncode)
    return dump


def generate(
    runner: ShellRunner,
    command: str,
    *,
    is_suppressed: Callable[[str], bool] = default_is_suppressed,
) -> GenerateResult:
    """Run one capture → diff → emit pass.

    The baseline is captured with an empty command, then ``command`` is
    evaluated in a fresh shell. Both captures happen sequentially and a
    non-zero exit status in either aborts the whole pass.

    Raises:
        CaptureError: If either capture fails.
    """

    baseline = parse_snapshot(_checked(runner.capture(""), ""))
    post = parse_snapshot(_checked(runner.capture(command), command))
    diff = diff_snapshots(baseline, post, is_suppressed=is_suppressed)
    logger.debug(
        "%s: %d environment, %d alias, %d function operations",
        runner.name(),
        len(diff.environment),
        len(diff.aliases),
        len(diff.functions),
    )
    return GenerateResult(
        command=command,
        baseline=baseline,
        post=post,
        diff=diff,
        script=render_script(diff),
    )
