from __future__ import annotations

import pytest

from basfish.bash_runner import CommandFailedError
from basfish.events import VariableAdded, VariableUpdated
from basfish.models import RawDump
from basfish.runner import generate


class _FakeRunner:
    def __init__(self, dumps: dict[str, RawDump]) -> None:
        self._dumps = dumps
        self.calls: list[str] = []

    def name(self) -> str:
        return "fake"

    def capture(self, command: str) -> RawDump:
        self.calls.append(command)
        return self._dumps[command]


BASELINE = RawDump(
    environment="PWD=/home/me\0SHLVL=1\0GONE=x\0",
    aliases="",
    functions="declare -f old_fn\n",
)


def test_generate_captures_baseline_then_command() -> None:
    post = RawDump(
        environment="PWD=/srv\0SHLVL=2\0FOO=bar\0",
        aliases="alias ll='ls -la'\n",
        functions="declare -f new_fn\n",
    )
    runner = _FakeRunner({"": BASELINE, "cd /srv; export FOO=bar": post})

    result = generate(runner, "cd /srv; export FOO=bar")

    assert runner.calls == ["", "cd /srv; export FOO=bar"]
    assert result.diff.environment[:2] == [
        VariableAdded(name="FOO", value="bar"),
        VariableUpdated(name="PWD", old="/home/me", new="/srv"),
    ]
    assert result.script.splitlines() == [
        "# Adding FOO",
        'set -g -x FOO "bar"',
        "# Updating PWD: '/home/me' -> '/srv'",
        'cd "/srv"',
        "# Removing GONE",
        "set -e GONE",
        'alias ll "ls -la"',
        "# Function added: new_fn (body not transplanted)",
        "# Function removed: old_fn (not erased)",
    ]


def test_generate_with_no_changes_is_empty() -> None:
    runner = _FakeRunner({"": BASELINE, "true": BASELINE})

    assert generate(runner, "true").script == ""


def test_generate_custom_predicate() -> None:
    post = RawDump(environment="PWD=/home/me\0SHLVL=1\0GONE=x\0FOO=1\0", aliases="", functions="declare -f old_fn\n")
    runner = _FakeRunner({"": BASELINE, "export FOO=1": post})

    result = generate(runner, "export FOO=1", is_suppressed=lambda name: name == "FOO")

    assert result.script == ""


def test_generate_fails_on_nonzero_exit() -> None:
    failed = RawDump(environment="", aliases="", functions="", returncode=1)
    runner = _FakeRunner({"": BASELINE, "false": failed})

    with pytest.raises(CommandFailedError) as excinfo:
        generate(runner, "false")

    assert excinfo.value.returncode == 1
    assert excinfo.value.command == "false"
