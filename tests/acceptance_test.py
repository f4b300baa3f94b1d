from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from aliasmeta import (
    FIELD_NAME,
    Alias,
    AliasMetadataHandler,
    Auth,
    Catalog,
    FieldData,
    FieldSchema,
    InvalidFieldError,
    field_schema,
)

ALIAS_METADATA_FIELDS = Catalog(
    default_fields=["role_name"],
    additional_fields=["remote_addr"],
)


@dataclass
class FakeConfig:
    alias_metadata: AliasMetadataHandler = field(
        default_factory=lambda: AliasMetadataHandler(catalog=ALIAS_METADATA_FIELDS)
    )

    def to_json(self) -> str:
        return json.dumps({"alias_metadata_handler": self.alias_metadata.to_dict()})

    @classmethod
    def from_json(cls, raw: str | None) -> FakeConfig:
        if raw is None:
            return cls()
        data = json.loads(raw)
        handler = AliasMetadataHandler.from_dict(data["alias_metadata_handler"], ALIAS_METADATA_FIELDS)
        return cls(alias_metadata=handler)


@dataclass
class Response:
    status: int
    data: dict[str, Any] = field(default_factory=dict)
    auth: Auth | None = None


@dataclass
class FakeBackend:
    storage: dict[str, str] = field(default_factory=dict)
    config_fields: dict[str, FieldSchema] = field(
        default_factory=lambda: {FIELD_NAME: field_schema(ALIAS_METADATA_FIELDS)}
    )

    def read_config(self) -> Response:
        conf = FakeConfig.from_json(self.storage.get("config"))
        # populated even when unconfigured, to show the defaults
        return Response(200, {FIELD_NAME: conf.alias_metadata.get_alias_metadata()})

    def update_config(self, **raw: Any) -> Response:
        conf = FakeConfig.from_json(self.storage.get("config"))
        try:
            conf.alias_metadata.parse_alias_metadata(FieldData(raw, self.config_fields))
        except InvalidFieldError as error:
            return Response(400, {"error": str(error)})
        self.storage["config"] = conf.to_json()
        return Response(204)

    def login(self, role_name: str, remote_addr: str) -> Response:
        conf = FakeConfig.from_json(self.storage.get("config"))
        auth = Auth(alias=Alias(name=role_name))
        conf.alias_metadata.populate_desired_alias_metadata(
            auth,
            {
                "role_name": role_name,
                "remote_addr": remote_addr,
            },
        )
        return Response(200, auth=auth)


@pytest.fixture(name="backend")
def backend_fixture() -> FakeBackend:
    return FakeBackend()


def login_metadata(backend: FakeBackend) -> dict[str, str]:
    response = backend.login("dev", "10.0.0.1")
    assert response.auth
    return dict(response.auth.alias.metadata)


def test_unconfigured(backend: FakeBackend) -> None:
    assert backend.read_config().data == {FIELD_NAME: ["role_name"]}
    assert login_metadata(backend) == {"role_name": "dev"}


def test_update_without_field_keeps_defaults(backend: FakeBackend) -> None:
    assert backend.update_config().status == 204
    assert json.loads(backend.storage["config"]) == {"alias_metadata_handler": {"alias_metadata": None}}
    assert login_metadata(backend) == {"role_name": "dev"}


def test_scenario(backend: FakeBackend) -> None:
    assert backend.update_config(alias_metadata="default,remote_addr").status == 204
    assert sorted(backend.read_config().data[FIELD_NAME]) == ["remote_addr", "role_name"]
    assert login_metadata(backend) == {"role_name": "dev", "remote_addr": "10.0.0.1"}

    assert backend.update_config(alias_metadata="").status == 204
    assert backend.read_config().data == {FIELD_NAME: []}
    assert login_metadata(backend) == {}

    response = backend.update_config(alias_metadata="bogus_field")
    assert response.status == 400
    assert response.data == {
        "error": '"bogus_field" is not an available field, please select from: remote_addr',
    }
    assert backend.read_config().data == {FIELD_NAME: []}
    assert login_metadata(backend) == {}


def test_rejected_update_keeps_previous_selection(backend: FakeBackend) -> None:
    backend.update_config(alias_metadata="default,remote_addr")
    before = backend.storage["config"]

    assert backend.update_config(alias_metadata="default,bogus_field").status == 400
    assert backend.storage["config"] == before
    assert login_metadata(backend) == {"role_name": "dev", "remote_addr": "10.0.0.1"}


def test_null_update_is_a_noop(backend: FakeBackend) -> None:
    backend.update_config(alias_metadata="default,remote_addr")
    assert backend.update_config(alias_metadata=None).status == 204
    assert login_metadata(backend) == {"role_name": "dev", "remote_addr": "10.0.0.1"}
