import logging
from dataclasses import dataclass, field

from aliasmeta import (
    FIELD_NAME,
    Alias,
    AliasMetadataHandler,
    Auth,
    Catalog,
    FieldData,
    InvalidFieldError,
    field_schema,
)

logging.basicConfig(level=logging.DEBUG)

fields = Catalog(
    default_fields=["role_name"],
    additional_fields=["remote_addr"],
)


@dataclass
class Config:
    alias_metadata: AliasMetadataHandler = field(default_factory=lambda: AliasMetadataHandler(catalog=fields))


schemas = {FIELD_NAME: field_schema(fields)}
print(schemas[FIELD_NAME].description)

config = Config()
print(config.alias_metadata.get_alias_metadata())

config.alias_metadata.parse_alias_metadata(FieldData({FIELD_NAME: "default,remote_addr"}, schemas))
print(config.alias_metadata.to_dict())

try:
    config.alias_metadata.parse_alias_metadata(FieldData({FIELD_NAME: "bogus"}, schemas))
except InvalidFieldError as error:
    print(error)

auth = Auth(alias=Alias(name="dev"))
config.alias_metadata.populate_desired_alias_metadata(auth, {"role_name": "dev", "remote_addr": "127.0.0.1"})
print(auth.alias.metadata)
