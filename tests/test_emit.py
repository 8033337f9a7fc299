from __future__ import annotations

from basfish.diff import SnapshotDiff
from basfish.emit import emit_aliases, emit_environment, emit_functions, render_script
from basfish.events import (
    AliasDeclared,
    FunctionAdded,
    FunctionRemoved,
    VariableAdded,
    VariableRemoved,
    VariableUpdated,
)


def test_emit_environment_statements() -> None:
    lines = emit_environment(
        [
            VariableAdded(name="FOO", value="a b"),
            VariableUpdated(name="BAR", old="1", new="2"),
            VariableRemoved(name="OLD"),
        ]
    )

    assert lines == [
        "# Adding FOO",
        'set -g -x FOO "a b"',
        "# Updating BAR: '1' -> '2'",
        'set -g -x BAR "2"',
        "# Removing OLD",
        "set -e OLD",
    ]


def test_emit_pwd_changes_directory() -> None:
    lines = emit_environment([VariableUpdated(name="PWD", old="/a", new="/my $dir")])

    assert lines == ["# Updating PWD: '/a' -> '/my $dir'", 'cd "/my \\$dir"']


def test_emit_comment_never_spans_lines() -> None:
    lines = emit_environment([VariableUpdated(name="MSG", old="a\nb", new="c")])

    assert lines[0] == "# Updating MSG: 'a\\nb' -> 'c'"
    assert lines[1] == 'set -g -x MSG "c"'


def test_emit_aliases() -> None:
    assert emit_aliases([AliasDeclared(name="ll", value="ls -la")]) == ['alias ll "ls -la"']


def test_emit_functions_are_comments_only() -> None:
    lines = emit_functions([FunctionAdded(name="f2"), FunctionRemoved(name="f1")])

    assert all(line.startswith("#") for line in lines)
    assert "f2" in lines[0]
    assert "f1" in lines[1]


def test_render_script_orders_sections() -> None:
    diff = SnapshotDiff(
        environment=[VariableAdded(name="FOO", value="1")],
        aliases=[AliasDeclared(name="ll", value="ls -la")],
        functions=[FunctionAdded(name="greet")],
    )

    assert render_script(diff).splitlines() == [
        "# Adding FOO",
        'set -g -x FOO "1"',
        'alias ll "ls -la"',
        "# Function added: greet (body not transplanted)",
    ]


def test_render_script_drops_empty_sections() -> None:
    diff = SnapshotDiff(environment=[], aliases=[AliasDeclared(name="g", value="git")], functions=[])

    assert render_script(diff) == 'alias g "git"'
    assert render_script(SnapshotDiff(environment=[], aliases=[], functions=[])) == ""
