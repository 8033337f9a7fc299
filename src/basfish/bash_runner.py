from __future__ import annotations

import logging
import subprocess
import uuid

from .models import RawDump, normalize_framing

logger = logging.getLogger(__name__)

# $1 is the command to evaluate, $2 the section marker, saved before the
# command can reset the positional parameters. The command's stdout
# is discarded; its stderr goes straight to ours. Everything after the eval
# goes through `builtin` so functions or aliases the command defined cannot
# shadow the dump commands.
_CAPTURE_SCRIPT = """\
__basfish_marker=$2
eval "$1" >/dev/null || builtin exit $?
builtin shopt -u expand_aliases
builtin command {env_command}
builtin printf '\\n%s\\n' "$__basfish_marker"
builtin alias
builtin printf '\\n%s\\n' "$__basfish_marker"
builtin declare -F
"""

_ENV_COMMANDS = {"nul": "env -0", "lines": "env"}
_MARKER_PREFIX = "___BASFISH_SECTION___"


class CaptureError(RuntimeError):
    """Raised when shell state could not be captured."""


class ShellSpawnError(CaptureError):
    """Raised when the shell executable could not be started."""


class CommandFailedError(CaptureError):
    """Raised when the evaluated command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int) -> None:
        super().__init__(f"command failed ({returncode}): {command}")
        self.command = command
        self.returncode = returncode


class CaptureFormatError(CaptureError):
    """Raised when the shell output is missing the expected sections."""


class BashRunner:
    """Captures bash state by running ``bash -c`` once per snapshot."""

    def __init__(self, *, shell: str = "bash", framing: str = "nul") -> None:
        self._shell = shell
        self._framing = normalize_framing(framing)

    def name(self) -> str:
        return self._shell

    def capture(self, command: str) -> RawDump:
        marker = f"{_MARKER_PREFIX}{uuid.uuid4().hex}"
        script = _CAPTURE_SCRIPT.format(env_command=_ENV_COMMANDS[self._framing])
        args = [self._shell, "-c", script, "basfish", command, marker]

        logger.debug("Capturing %s state for %r", self._shell, command)
        try:
            proc = subprocess.run(
                args,
                check=False,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise ShellSpawnError(f"could not run {self._shell}: {exc}") from exc

        if proc.returncode != 0:
            return RawDump(
                environment="",
                aliases="",
                functions="",
                returncode=proc.returncode,
                framing=self._framing,
            )

        sections = proc.stdout.split(f"\n{marker}\n")
        if len(sections) != 3:
            raise CaptureFormatError(
                f"{self._shell} output for {command!r} is missing state sections "
                "(did the command exit the shell?)"
            )
        environment, aliases, functions = sections
        return RawDump(
            environment=environment,
            aliases=aliases,
            functions=functions,
            returncode=proc.returncode,
            framing=self._framing,
        )
