from .auth import Alias, Auth
from .errors import AliasMetadataError, InvalidFieldError
from .handler import AliasMetadataHandler
from .schema import FIELD_NAME, FieldData, FieldSchema, field_schema, parse_comma_string
from .selection import (
    DEFAULT_KEYWORD,
    PERSISTED_KEY,
    Catalog,
    Selected,
    Selection,
    Unset,
    apply_selection,
    describe_selection,
    dump_selection,
    get_effective_selection,
    load_selection,
    parse_selection,
)
from .types import AliasMetadata, AvailableData, RawSelection

__all__ = [
    "apply_selection",
    "describe_selection",
    "dump_selection",
    "field_schema",
    "get_effective_selection",
    "load_selection",
    "parse_comma_string",
    "parse_selection",
    "Alias",
    "AliasMetadata",
    "AliasMetadataError",
    "AliasMetadataHandler",
    "Auth",
    "AvailableData",
    "Catalog",
    "DEFAULT_KEYWORD",
    "FIELD_NAME",
    "FieldData",
    "FieldSchema",
    "InvalidFieldError",
    "PERSISTED_KEY",
    "RawSelection",
    "Selected",
    "Selection",
    "Unset",
]
