"""Typed access to the loosely-typed argument bag of a ``tools/call``."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class ArgumentError(ValueError):
    """An argument is missing or has the wrong type.

    The message is the user-facing text a tool puts in its failure result.
    """

    def __init__(self, name: str, expected: str = "string") -> None:
        self.name = name
        self.expected = expected
        super().__init__(f"Error: '{name}' argument must be a {expected}")


class ToolArguments(Mapping[str, Any]):
    """Read-only view over the ``arguments`` object of a tool call."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def get_str(self, name: str) -> str:
        """Return argument *name* as a string or raise :class:`ArgumentError`."""
        value = self._values.get(name)
        if not isinstance(value, str):
            raise ArgumentError(name, "string")
        return value

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ToolArguments({self._values!r})"
