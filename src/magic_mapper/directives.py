"""Schema directives.

A schema maps a (transformed) property name to one of three directives:

- the ``Direct`` sentinel copies the value as it is, without recursion,
- a callable replaces the value with ``fn(value)``,
- anything else is a literal that replaces the value verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


class _DirectType:
    """Type of the ``Direct`` sentinel. Only one instance ever exists."""

    _instance = None

    def __new__(cls) -> "_DirectType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MagicMapper.Direct"

    def __copy__(self) -> "_DirectType":
        return self

    def __deepcopy__(self, memo: dict) -> "_DirectType":
        return self

    def __reduce__(self) -> str:
        return "Direct"


Direct = _DirectType()


@dataclass(frozen=True)
class DirectCopy:
    def apply(self, value: Any) -> Any:
        return value


@dataclass(frozen=True)
class Transform:
    fn: Callable[[Any], Any]

    def apply(self, value: Any) -> Any:
        return self.fn(value)


@dataclass(frozen=True)
class LiteralValue:
    value: Any

    def apply(self, value: Any) -> Any:
        return self.value


Directive = Union[DirectCopy, Transform, LiteralValue]

_DIRECT_COPY = DirectCopy()


def resolve_directive(entry: Any) -> Directive:
    """Classify a raw schema entry into its directive variant."""
    if entry is Direct:
        return _DIRECT_COPY
    if callable(entry):
        return Transform(entry)
    # False, 0, "" and None are literals too
    return LiteralValue(entry)
