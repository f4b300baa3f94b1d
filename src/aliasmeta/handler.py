from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .auth import Auth
from .schema import FIELD_NAME, FieldData, parse_comma_string
from .selection import (
    PERSISTED_KEY,
    Catalog,
    Selection,
    Unset,
    apply_selection,
    dump_selection,
    get_effective_selection,
    load_selection,
    parse_selection,
)
from .types import AvailableData

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class AliasMetadataHandler:
    """Alias metadata selection of a plugin config.

    Store it as a field of the config, then call it from the paths:

    ```python
    @dataclass
    class Config:
        alias_metadata: AliasMetadataHandler

    config.alias_metadata.parse_alias_metadata(data)  # on config writes
    config.alias_metadata.get_alias_metadata()  # on config reads
    config.alias_metadata.populate_desired_alias_metadata(auth, available)  # on login
    ```
    """

    catalog: Catalog
    selection: Selection = field(default=Unset)

    def get_alias_metadata(self) -> list[str]:
        """Every field currently added to alias metadata, `default` expanded."""
        return list(get_effective_selection(self.selection, self.catalog))

    def parse_alias_metadata(self, data: FieldData) -> bool:
        """Read the user selection from the request.

        Returns:
            True when the selection was replaced

        Raises:
            InvalidFieldError: the request holds an unknown field, selection is left as is
        """
        raw, ok = data.get_ok(FIELD_NAME)
        if not ok:
            return False
        # tokenized here too, in case the field was not declared in the schemas
        selection = parse_selection(parse_comma_string(raw), self.catalog)
        if selection is None:
            return False
        logger.debug("Alias metadata selection changed from %r to %r", self.selection, selection)
        self.selection = selection
        return True

    def populate_desired_alias_metadata(self, auth: Auth, available: AvailableData) -> None:
        """Add the wanted fields of `available` to the alias metadata of `auth`."""
        apply_selection(
            get_effective_selection(self.selection, self.catalog),
            available,
            auth.alias.metadata,
        )

    def to_dict(self) -> dict[str, Any]:
        # catalog is configured by code, not by the user, so it is not stored
        return {PERSISTED_KEY: dump_selection(self.selection)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None, catalog: Catalog) -> AliasMetadataHandler:
        data = data or {}
        return cls(catalog=catalog, selection=load_selection(data.get(PERSISTED_KEY)))
