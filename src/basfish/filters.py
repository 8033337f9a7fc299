from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

# Variables fish manages itself; a client script must never set them.
FISH_READONLY: frozenset[str] = frozenset(
    {
        "PWD",
        "SHLVL",
        "history",
        "pipestatus",
        "status",
        "version",
        "FISH_VERSION",
        "fish_pid",
        "hostname",
        "_",
        "fish_private_mode",
    }
)

# Noise introduced by the capture itself.
IGNORED: frozenset[str] = frozenset({"PS1", "XPC_SERVICE_NAME"})

# bash exports functions as BASH_FUNC_name%% variables.
EXPORTED_FUNCTION_PREFIX = "BASH_FUNC"
BOOKKEEPING_SIGIL = "%"


@dataclass(frozen=True, slots=True)
class SuppressionPolicy:
    """Decides which environment names are invisible to the diff.

    Instances are plain ``name -> bool`` callables, so anything accepting
    :func:`is_suppressed` accepts a policy too.
    """

    readonly: frozenset[str] = FISH_READONLY
    ignored: frozenset[str] = IGNORED
    prefixes: tuple[str, ...] = (EXPORTED_FUNCTION_PREFIX, BOOKKEEPING_SIGIL)
    always_visible: frozenset[str] = field(default_factory=lambda: frozenset({"PWD"}))

    def __call__(self, name: str) -> bool:
        if name in self.always_visible:
            return False
        return (
            name in self.readonly
            or name in self.ignored
            or any(name.startswith(prefix) for prefix in self.prefixes)
        )

    def extend(self, names: Iterable[str]) -> "SuppressionPolicy":
        """Return a copy that also ignores ``names``."""

        return SuppressionPolicy(
            readonly=self.readonly,
            ignored=self.ignored | frozenset(names),
            prefixes=self.prefixes,
            always_visible=self.always_visible,
        )


DEFAULT_POLICY = SuppressionPolicy()


def is_suppressed(name: str) -> bool:
    """Return True if ``name`` must not be propagated to fish.

    ``PWD`` is never suppressed: directory changes are always carried over
    (as ``cd``) even though fish treats the variable as read-only.
    """

    return DEFAULT_POLICY(name)
