"""Type definitions for ABI loading and typings generation."""

from collections.abc import Callable
from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin


@dataclass
class AbiTypeAlias(DataClassJsonMixin):
    """Represents a `types` entry, a new name for an existing type."""

    new_type_name: str
    type: str


@dataclass
class AbiVariant(DataClassJsonMixin):
    """Represents a tagged union over `types`.

    Member order is significant, each member name is also its tag.
    """

    name: str
    types: list[str] | None = None


@dataclass
class AbiField(DataClassJsonMixin):
    """Represents a struct field.

    `type` may carry a trailing `?` marking the field optional.
    """

    name: str
    type: str


@dataclass
class AbiStruct(DataClassJsonMixin):
    """Represents a struct definition with an optional base struct."""

    name: str
    base: str | None = ""
    fields: list[AbiField] | None = None


@dataclass
class Abi(DataClassJsonMixin):
    """Represents a complete ABI definition.

    Missing collections are treated as empty.
    """

    version: str = ""
    types: list[AbiTypeAlias] | None = None
    variants: list[AbiVariant] | None = None
    structs: list[AbiStruct] | None = None


@dataclass
class TransformOptions:
    """Options for generating typings."""

    # Formats ABI names as TypeScript identifiers, e.g. snake_case to PascalCase
    type_formatter: Callable[[str], str]
    indent: str = "    "
    # Prefix aliases and interfaces with `export`
    export: bool = False
    # Wrap everything in `declare namespace <name>`
    namespace: str | None = None


def declared_names(abi: Abi) -> set[str]:
    """Return every type name declared by the ABI itself."""
    names = {alias.new_type_name for alias in abi.types or []}
    names.update(variant.name for variant in abi.variants or [])
    names.update(struct.name for struct in abi.structs or [])
    return names
