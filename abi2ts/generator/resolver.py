"""Resolution of ABI type tokens to TypeScript type expressions."""

from collections.abc import Callable

from .builtins import PASSTHROUGH_TYPES, Builtin, is_builtin, lookup
from .errors import UnresolvableReference

OPTIONAL_MARKER = "?"
ARRAY_SUFFIX = "[]"
ABSENT = "undefined"


def split_optional(token: str) -> tuple[str, bool]:
    """Strip a trailing optional marker, returning (name, optional)."""
    if token.endswith(OPTIONAL_MARKER):
        return token[:-1], True
    return token, False


def _element_name(name: str) -> str:
    while name.endswith(ARRAY_SUFFIX):
        name = name[: -len(ARRAY_SUFFIX)]
    return name


class TypeResolver:
    """Resolve raw ABI type tokens.

    Every built-in that is resolved is added to `used`, which the caller
    owns and later hands to the assembler. Passing `declared` enables strict
    mode, where names that are neither built-in nor declared are an error
    instead of being formatted optimistically.
    """

    def __init__(
        self,
        formatter: Callable[[str], str],
        used: set[Builtin],
        declared: set[str] | None = None,
    ):
        self.formatter = formatter
        self.used = used
        self.declared = declared

    def resolve(self, token: str) -> str:
        """Resolve a token, turning a trailing `?` into `| undefined`."""
        name, optional = split_optional(token)
        expr = self._resolve(name, token)
        if optional:
            expr += f" | {ABSENT}"
        return expr

    def resolve_name(self, name: str) -> str:
        """Resolve a token that has already had its optional marker stripped."""
        return self._resolve(name, name)

    def _resolve(self, name: str, token: str) -> str:
        builtin = lookup(name)
        if builtin is not None:
            self.used.add(builtin)
            return self.formatter(name)
        if name in PASSTHROUGH_TYPES:
            return PASSTHROUGH_TYPES[name]
        element = lookup(_element_name(name))
        if element is not None:
            # `uint8[]` formats to `Uint8[]`, which needs the `Uint8` alias
            self.used.add(element)
        if self.declared is not None:
            self._check_declared(name, token)
        return self.formatter(name)

    def _check_declared(self, name: str, token: str) -> None:
        element = _element_name(name)
        if element in self.declared or element in PASSTHROUGH_TYPES or is_builtin(element):
            return
        raise UnresolvableReference(element, token)
