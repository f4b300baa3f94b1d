from __future__ import annotations

from dataclasses import dataclass


class AliasMetadataError(Exception):
    """Base class of errors raised by aliasmeta."""


@dataclass(eq=False)
class InvalidFieldError(AliasMetadataError, ValueError):
    """Raised when the operator selects a field that is not in the catalog."""

    field: str
    available: tuple[str, ...]

    def __str__(self) -> str:
        return f'"{self.field}" is not an available field, please select from: {", ".join(self.available)}'
