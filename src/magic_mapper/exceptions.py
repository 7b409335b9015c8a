from __future__ import annotations

from typing import Any, Optional


class MagicMapperError(Exception):
    """Base exception for all magic_mapper errors."""


class InvalidOptionType(MagicMapperError, TypeError):
    """Raised when a mapper option has a value of the wrong type."""

    def __init__(self, option: str, value: Any, detail: Optional[str] = None) -> None:
        self.option = option
        self.value = value
        message = f"Option '{option}' has invalid value {value!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class SchemaRequired(MagicMapperError, ValueError):
    """Raised when exclusive mapping is requested without a schema."""

    def __init__(self) -> None:
        super().__init__("Exclusive option requires a schema.")


class MaxDepthExceeded(MagicMapperError, RecursionError):
    """Raised when nested sources go deeper than the configured max_depth."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Source nesting exceeds max_depth={max_depth}.")
