"""Name formatters for generated identifiers."""

from collections.abc import Callable


def to_pascal_case(name: str) -> str:
    """Convert snake_case to PascalCase, `account_name[]` -> `AccountName[]`."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def to_camel_case(name: str) -> str:
    """Convert snake_case to camelCase."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def identity(name: str) -> str:
    return name


FORMATTERS: dict[str, Callable[[str], str]] = {
    "pascal": to_pascal_case,
    "camel": to_camel_case,
    "identity": identity,
}
