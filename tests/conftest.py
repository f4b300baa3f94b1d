from __future__ import annotations

import pytest

from aliasmeta import Catalog


@pytest.fixture(name="catalog")
def catalog_fixture() -> Catalog:
    return Catalog(
        default_fields=["role_name"],  # likely never changes, the alias is the role name
        additional_fields=["remote_addr"],  # likely changes with every caller
    )
