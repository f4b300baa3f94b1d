from collections.abc import Mapping, MutableMapping, Sequence
from typing import TypeAlias

AvailableData: TypeAlias = Mapping[str, str]
"""
Values a plugin can offer at login time, keyed by field name.
"""

AliasMetadata: TypeAlias = MutableMapping[str, str]
"""
Metadata attached to an identity alias.
"""

RawSelection: TypeAlias = Sequence[str] | None
"""
Tokens sent by the operator, or None when the field was not sent at all.
"""
