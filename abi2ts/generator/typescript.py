"""TypeScript typings generator for ABI definitions."""

import logging

from .. import __version__
from .builtins import Builtin, registry_index
from .parser import validate
from .resolver import TypeResolver, split_optional
from .types import Abi, AbiStruct, AbiTypeAlias, AbiVariant, TransformOptions, declared_names

logger = logging.getLogger(__name__)

TOOL_NAME = "abi2ts"


def _export_prefix(options: TransformOptions) -> str:
    return "export " if options.export else ""


def _gen_alias(alias: AbiTypeAlias, options: TransformOptions, resolver: TypeResolver) -> str:
    """Generate a type alias line."""
    name = options.type_formatter(alias.new_type_name)
    return f"{_export_prefix(options)}type {name} = {resolver.resolve(alias.type)}"


def _gen_variant(variant: AbiVariant, options: TransformOptions, resolver: TypeResolver) -> str:
    """Generate a union of [tag, value] tuples, tagged with the raw member name."""
    members = [f"['{t}', {resolver.resolve(t)}]" for t in variant.types or []]
    union = " | ".join(members) if members else "never"
    return f"{_export_prefix(options)}type {options.type_formatter(variant.name)} = {union}"


def _gen_struct(
    struct: AbiStruct, options: TransformOptions, resolver: TypeResolver
) -> list[str]:
    """Generate an interface block for a struct.

    Optional fields are marked on the field name only, the value type is
    resolved without the `| undefined` union.
    """
    fmt = options.type_formatter
    header = f"{_export_prefix(options)}interface {fmt(struct.name)}"
    if struct.base:
        header += f" extends {fmt(struct.base)}"
    lines = [header + " {"]
    for field in struct.fields or []:
        name, optional = split_optional(field.type)
        marker = "?" if optional else ""
        lines.append(f"{options.indent}{field.name}{marker}: {resolver.resolve_name(name)}")
    lines.append("}")
    return lines


def emit_declarations(
    abi: Abi, options: TransformOptions, resolver: TypeResolver
) -> list[str]:
    """Emit aliases, variants and structs, in that order."""
    out: list[str] = []
    for alias in abi.types or []:
        out.append(_gen_alias(alias, options, resolver))
    for variant in abi.variants or []:
        out.append(_gen_variant(variant, options, resolver))
    for struct in abi.structs or []:
        out.extend(_gen_struct(struct, options, resolver))
    return out


def builtin_declarations(used: set[Builtin], options: TransformOptions) -> list[str]:
    """Declare the used built-ins, last registered first."""
    prefix = _export_prefix(options)
    ordered = sorted(used, key=registry_index, reverse=True)
    return [f"{prefix}type {options.type_formatter(b.name)} = {b.type}" for b in ordered]


def banner(abi_version: str) -> str:
    return f"// Generated by {TOOL_NAME} {__version__} - {abi_version}"


def assemble(
    lines: list[str], used: set[Builtin], options: TransformOptions, abi_version: str
) -> list[str]:
    """Add built-in aliases, namespace wrapping and the banner to emitted lines.

    Built-in aliases go ahead of every declaration rather than after the
    first line, which could be the opening of an interface body.
    """
    out = builtin_declarations(used, options) + lines

    if options.namespace:
        out = [options.indent + line for line in out]
        out.insert(0, f"declare namespace {options.namespace} {{")
        out.append("}")

    return [banner(abi_version), ""] + out


def transform(abi: Abi, options: TransformOptions, strict: bool = False) -> list[str]:
    """Return TypeScript typings for the ABI as a list of lines."""
    validate(abi)

    used: set[Builtin] = set()
    resolver = TypeResolver(
        options.type_formatter, used, declared_names(abi) if strict else None
    )
    lines = emit_declarations(abi, options, resolver)
    logger.debug("Emitted %d lines, %d builtins used", len(lines), len(used))

    return assemble(lines, used, options, abi.version)


def render(abi: Abi, options: TransformOptions, strict: bool = False) -> str:
    """Render typings for the ABI as source text."""
    return "\n".join(transform(abi, options, strict=strict)) + "\n"
