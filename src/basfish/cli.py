"""basfish command line.

Usage:
    basfish source ~/.bashrc | source
    basfish --ignore LS_COLORS export FOO=bar | source
"""

from __future__ import annotations

import typer

from .bash_runner import BashRunner, CaptureError
from .config import Settings, configure_logging
from .filters import DEFAULT_POLICY
from .models import normalize_framing
from .runner import generate

USAGE = "Usage: basfish <bash-command>"

app = typer.Typer(add_completion=False, help="Replay the effects of a bash command in fish.")


@app.command(
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True}
)
def run(
    command: list[str] | None = typer.Argument(None, help="Bash command to evaluate"),
    shell: str | None = typer.Option(None, "--shell", help="Source shell executable"),
    framing: str | None = typer.Option(
        None, "--framing", help="Environment dump framing: nul or lines"
    ),
    ignore: list[str] | None = typer.Option(
        None, "--ignore", help="Variable name to leave out (repeatable)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Print a fish script replaying the environment, alias and function changes."""
    if not command:
        typer.echo(USAGE)
        return

    try:
        settings = Settings.from_env()
        configure_logging("DEBUG" if verbose else settings.log_level)
        runner = BashRunner(
            shell=shell or settings.shell,
            framing=normalize_framing(framing) if framing else settings.framing,
        )
        policy = DEFAULT_POLICY.extend([*settings.ignore, *(ignore or [])])
        result = generate(runner, " ".join(command), is_suppressed=policy)
    except (CaptureError, ValueError) as exc:
        typer.echo(f"basfish internal error: {exc}", err=True)
        raise typer.Exit(1)

    if result.script:
        typer.echo(result.script)


def main() -> None:
    app()
