from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .selection import DEFAULT_KEYWORD, Catalog, describe_selection

FIELD_NAME = "alias_metadata"
"""User facing name of the field."""


@dataclass(frozen=True, kw_only=True)
class FieldSchema:
    name: str
    type: str
    description: str = ""
    display_value: str | None = None
    default: Any = None


def field_schema(catalog: Catalog) -> FieldSchema:
    """Schema of the `alias_metadata` field, described from the catalog.

    ```python
    schema = field_schema(Catalog(["role_name"], ["remote_addr"]))
    assert schema.default == ("default",)
    ```
    """
    return FieldSchema(
        name=FIELD_NAME,
        type="comma_string_slice",
        description=describe_selection(catalog),
        display_value="default,field1,field2",
        default=(DEFAULT_KEYWORD,),
    )


def parse_comma_string(value: Any) -> list[str]:
    """Tokenize a comma separated value.

    Blank tokens are dropped, so an empty string gives an empty list.
    Scalars are weakly decoded into strings, so unknown values end up
    rejected by field validation instead of here.
    """
    if isinstance(value, str) or not isinstance(value, Sequence):
        value = str(value).split(",")
    tokens = []
    for token in value:
        if token := str(token).strip():
            tokens.append(token)
    return tokens


@dataclass
class FieldData:
    """Raw input of one request, checked against schemas."""

    raw: Mapping[str, Any] = field(default_factory=dict)
    schemas: Mapping[str, FieldSchema] = field(default_factory=dict)

    def get_ok(self, name: str) -> tuple[Any, bool]:
        """
        Returns:
            the parsed value and True when the request holds `name`, otherwise None and False.
            A null value counts as absent.
        """
        if self.raw.get(name) is None:
            return None, False
        return self._parse(name, self.raw[name]), True

    def get(self, name: str) -> Any:
        value, ok = self.get_ok(name)
        if ok:
            return value
        if schema := self.schemas.get(name):
            default = schema.default
            return list(default) if isinstance(default, tuple) else default
        return None

    def _parse(self, name: str, value: Any) -> Any:
        schema = self.schemas.get(name)
        if schema and schema.type == "comma_string_slice":
            return parse_comma_string(value)
        return value
