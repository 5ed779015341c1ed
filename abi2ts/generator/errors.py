"""Errors raised while loading or transforming an ABI."""


class Abi2TsError(RuntimeError):
    """Base class for abi2ts errors."""


class MalformedSchema(Abi2TsError):
    """Raised when the ABI is structurally unusable."""


class UnresolvableReference(Abi2TsError):
    """Raised in strict mode when a type name is not declared anywhere."""

    def __init__(self, name: str, token: str):
        super().__init__(f"{token!r} references undeclared type {name!r}")
        self.name = name
        self.token = token
