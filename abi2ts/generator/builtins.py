"""Built-in ABI types and their TypeScript representations."""

from dataclasses import dataclass
from enum import StrEnum


class BuiltinName(StrEnum):
    """Names of the ABI built-in types, in registry order."""

    ASSET = "asset"
    NAME = "name"
    BYTES = "bytes"

    CHECKSUM160 = "checksum160"
    CHECKSUM256 = "checksum256"
    CHECKSUM512 = "checksum512"

    PRIVATE_KEY = "private_key"
    PUBLIC_KEY = "public_key"
    SIGNATURE = "signature"

    SYMBOL = "symbol"
    SYMBOL_CODE = "symbol_code"

    TIME_POINT = "time_point"
    TIME_POINT_SEC = "time_point_sec"
    BLOCK_TIMESTAMP_TYPE = "block_timestamp_type"

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    INT128 = "int128"

    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINT128 = "uint128"

    FLOAT32 = "float32"
    FLOAT64 = "float64"
    FLOAT128 = "float128"


class Passthrough(StrEnum):
    """Tokens with a fixed TypeScript spelling that are not declared as aliases."""

    STRING = "string"
    STRING_ARRAY = "string[]"
    BOOL = "bool"
    BOOL_ARRAY = "bool[]"


PASSTHROUGH_TYPES: dict[str, str] = {
    Passthrough.STRING: "string",
    Passthrough.STRING_ARRAY: "string[]",
    Passthrough.BOOL: "boolean",
    Passthrough.BOOL_ARRAY: "boolean[]",
}


@dataclass(frozen=True)
class Builtin:
    """A built-in ABI type.

    `type` is the TypeScript expression the generated alias points at.
    64 bit integers accept strings as well since they can exceed
    Number.MAX_SAFE_INTEGER, wider types are strings only.
    """

    name: str
    type: str


_TYPE_MAP: dict[BuiltinName, str] = {
    BuiltinName.ASSET: "string",
    BuiltinName.NAME: "string",
    BuiltinName.BYTES: "string | number[] | Uint8Array",
    BuiltinName.CHECKSUM160: "string",
    BuiltinName.CHECKSUM256: "string",
    BuiltinName.CHECKSUM512: "string",
    BuiltinName.PRIVATE_KEY: "string",
    BuiltinName.PUBLIC_KEY: "string",
    BuiltinName.SIGNATURE: "string",
    BuiltinName.SYMBOL: "string",
    BuiltinName.SYMBOL_CODE: "string",
    BuiltinName.TIME_POINT: "string",
    BuiltinName.TIME_POINT_SEC: "string",
    BuiltinName.BLOCK_TIMESTAMP_TYPE: "string",
    BuiltinName.INT8: "number",
    BuiltinName.INT16: "number",
    BuiltinName.INT32: "number",
    BuiltinName.INT64: "number | string",
    BuiltinName.INT128: "string",
    BuiltinName.UINT8: "number",
    BuiltinName.UINT16: "number",
    BuiltinName.UINT32: "number",
    BuiltinName.UINT64: "number | string",
    BuiltinName.UINT128: "string",
    BuiltinName.FLOAT32: "number",
    BuiltinName.FLOAT64: "number",
    BuiltinName.FLOAT128: "string",
}

BUILTINS: tuple[Builtin, ...] = tuple(Builtin(str(name), _TYPE_MAP[name]) for name in BuiltinName)

_BY_NAME: dict[str, Builtin] = {b.name: b for b in BUILTINS}
_INDEX: dict[Builtin, int] = {b: i for i, b in enumerate(BUILTINS)}


def lookup(name: str) -> Builtin | None:
    """Return the built-in called exactly `name`, if any."""
    return _BY_NAME.get(name)


def registry_index(builtin: Builtin) -> int:
    """Position of `builtin` in the registry."""
    return _INDEX[builtin]


def is_builtin(name: str) -> bool:
    return name in _BY_NAME
