from __future__ import annotations

from dataclasses import dataclass, field

from .types import AliasMetadata


@dataclass
class Alias:
    name: str
    metadata: AliasMetadata = field(default_factory=dict)


@dataclass
class Auth:
    """Result of a successful login."""

    alias: Alias
    policies: list[str] = field(default_factory=list)
