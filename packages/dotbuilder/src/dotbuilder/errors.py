"""Error hierarchy for the DOT builder."""

from typing import Any


class DotBuilderError(Exception):
    """Base error for all builder errors."""


class InvalidPropertyValueError(DotBuilderError, ValueError):
    """Value outside the closed symbol set of an enum or boolean property."""

    def __init__(self, name: str, value: Any, allowed: list[str]):
        super().__init__(
            f"Invalid value {value!r} for property {name!r}; expected one of: {', '.join(allowed)}"
        )
        self.name = name
        self.value = value
        self.allowed = allowed


class UnknownPropertyError(DotBuilderError, KeyError):
    """Property name not declared by the store it was used on."""

    def __init__(self, name: str, store: str):
        super().__init__(f"Unknown property {name!r} for {store}")
        self.name = name
        self.store = store

    def __str__(self) -> str:
        return self.args[0]
