"""Summary of the declarations an ABI produces."""

from dataclasses import dataclass
from enum import StrEnum, auto

from .builtins import Builtin, registry_index
from .resolver import TypeResolver
from .types import Abi, TransformOptions
from .typescript import emit_declarations


class DeclarationKind(StrEnum):
    """Kind of generated declaration."""

    TYPE = auto()  # alias for another type
    VARIANT = auto()  # union of tagged tuples
    STRUCT = auto()  # interface


@dataclass(frozen=True)
class DeclarationInfo:
    """A single generated declaration."""

    name: str
    target_name: str
    kind: DeclarationKind
    detail: str  # aliased type, member count or base struct


@dataclass(frozen=True)
class AbiSummary:
    """What a transform of the ABI would produce."""

    version: str
    declarations: list[DeclarationInfo]
    used_builtins: list[Builtin]  # registry order
    line_count: int

    def count(self, kind: DeclarationKind) -> int:
        return sum(1 for d in self.declarations if d.kind == kind)


def summarize(abi: Abi, options: TransformOptions) -> AbiSummary:
    """Summarize the declarations and built-ins an ABI produces."""
    fmt = options.type_formatter
    declarations: list[DeclarationInfo] = []

    for alias in abi.types or []:
        declarations.append(
            DeclarationInfo(
                alias.new_type_name, fmt(alias.new_type_name), DeclarationKind.TYPE, alias.type
            )
        )
    for variant in abi.variants or []:
        members = variant.types or []
        declarations.append(
            DeclarationInfo(
                variant.name, fmt(variant.name), DeclarationKind.VARIANT, f"{len(members)} members"
            )
        )
    for struct in abi.structs or []:
        detail = f"extends {struct.base}" if struct.base else ""
        declarations.append(
            DeclarationInfo(struct.name, fmt(struct.name), DeclarationKind.STRUCT, detail)
        )

    used: set[Builtin] = set()
    lines = emit_declarations(abi, options, TypeResolver(fmt, used))

    return AbiSummary(
        version=abi.version,
        declarations=declarations,
        used_builtins=sorted(used, key=registry_index),
        line_count=len(lines),
    )
