from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VariableAdded:
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class VariableUpdated:
    name: str
    old: str
    new: str


@dataclass(frozen=True, slots=True)
class VariableRemoved:
    name: str


@dataclass(frozen=True, slots=True)
class AliasDeclared:
    """An alias present after the command ran.

    Aliases are not diffed; every alias in the post snapshot is redeclared.
    """

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class FunctionAdded:
    name: str


@dataclass(frozen=True, slots=True)
class FunctionRemoved:
    name: str


EnvironmentOp = VariableAdded | VariableUpdated | VariableRemoved
FunctionOp = FunctionAdded | FunctionRemoved
