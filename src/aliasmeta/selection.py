from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Annotated, Any, TypeAlias

from typing_extensions import Doc  # type: ignore[attr-defined]

from .errors import AliasMetadataError, InvalidFieldError
from .types import AliasMetadata, AvailableData, RawSelection

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD = "default"

PERSISTED_KEY = "alias_metadata"


@dataclass(frozen=True)
class Catalog:
    """Fields a plugin declares as selectable.

    For example:

    ```python
    Catalog(
        default_fields=["role_name"],
        additional_fields=["remote_addr"],
    )
    ```

    Default fields should all have a low rate of change, because each change
    can incur a write to storage.
    """

    default_fields: tuple[str, ...] = ()
    additional_fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable, but freeze them
        object.__setattr__(self, "default_fields", tuple(self.default_fields))
        object.__setattr__(self, "additional_fields", tuple(self.additional_fields))

    def __contains__(self, name: object) -> bool:
        return name in self.default_fields or name in self.additional_fields


class UnsetSentinel(enum.Enum):
    """Marks that the operator never made a selection.

    Use `Unset` directly
    """

    UNSET = enum.auto()

    def __repr__(self) -> str:
        return "Unset"


Unset = UnsetSentinel.UNSET


@dataclass(frozen=True)
class Selected:
    """An explicit selection, with `default` already expanded.

    May be empty, meaning no alias metadata at all.
    """

    fields: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", unique(self.fields))


Selection: TypeAlias = UnsetSentinel | Selected
"""
Stored choice of the operator.

```python
Unset                      # never set, defaults apply
Selected(("role_name",))   # explicitly chosen
Selected(())               # explicitly opted out
```
"""


def unique(values: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates, first occurrence wins."""
    return tuple(dict.fromkeys(values))


def describe_selection(catalog: Catalog) -> str:
    """Human readable description of the `alias_metadata` field."""
    desc = "The metadata to include on the aliases generated by this plugin."
    if catalog.default_fields:
        desc += f" When set to 'default', includes: {', '.join(catalog.default_fields)}."
    if catalog.additional_fields:
        desc += f" These fields are available to add: {', '.join(catalog.additional_fields)}."
    desc += (
        " Not editing this field means the 'default' fields are included."
        " Explicitly setting this field to empty overrides the 'default' and means no alias metadata will be included."
        " Add fields by sending, 'default,field1,field2'."
        " We advise only including fields that change rarely because each change triggers a storage write."
    )
    return desc


def get_effective_selection(selection: Selection, catalog: Catalog) -> tuple[str, ...]:
    """Fields that are actually copied at login time.

    ```python
    catalog = Catalog(["role_name"], ["remote_addr"])
    assert get_effective_selection(Unset, catalog) == ("role_name",)
    assert get_effective_selection(Selected(()), catalog) == ()
    ```
    """
    match selection:
        case Selected(fields=fields):
            return fields
        case UnsetSentinel.UNSET:
            return catalog.default_fields
        case _:
            raise TypeError(f"expected Unset or Selected, got {selection!r}")


def parse_selection(
    raw: Annotated[
        RawSelection,
        Doc(
            """
            Tokens sent by the operator. None means the field was not sent at all,
            which is not the same thing as an empty list.
            """
        ),
    ],
    catalog: Catalog,
) -> Selection | None:
    """Turn the operator input into a selection.

    Returns:
        the new selection, or None when there is nothing to change

    Raises:
        InvalidFieldError: a token is neither `default` nor a catalog member
        TypeError: `raw` is a bare string instead of tokens
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        raise TypeError(f"expected a sequence of tokens, got the string {raw!r}")

    fields: list[str] = []
    for token in raw:
        if token == DEFAULT_KEYWORD:
            logger.debug("Expand %r into %s", DEFAULT_KEYWORD, catalog.default_fields)
            fields.extend(catalog.default_fields)
        elif token in catalog:
            fields.append(token)
        else:
            raise InvalidFieldError(token, catalog.additional_fields)
    return Selected(tuple(fields))


def apply_selection(
    effective: Iterable[str],
    available: AvailableData,
    destination: AliasMetadata,
) -> None:
    """Copy the selected fields of `available` into `destination`.

    Selected fields missing from `available` are skipped.
    """
    wanted = frozenset(effective)
    for key, value in available.items():
        if key in wanted:
            destination[key] = value
            logger.debug("Copied %s into alias metadata", key)


def dump_selection(selection: Selection) -> list[str] | None:
    match selection:
        case Selected(fields=fields):
            return list(fields)
        case UnsetSentinel.UNSET:
            return None
        case _:
            raise TypeError(f"expected Unset or Selected, got {selection!r}")


def load_selection(raw: Any) -> Selection:
    if raw is None:
        return Unset
    if isinstance(raw, str) or not isinstance(raw, list | tuple):
        raise AliasMetadataError(f"cannot load selection from {raw!r}")
    if not all(isinstance(value, str) for value in raw):
        raise AliasMetadataError(f"cannot load selection from {raw!r}")
    return Selected(tuple(raw))
