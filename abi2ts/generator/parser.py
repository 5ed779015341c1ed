"""ABI definition loader."""

import json
import logging
from pathlib import Path
from typing import Any

from .errors import MalformedSchema
from .types import Abi

logger = logging.getLogger(__name__)


def validate(abi: Abi) -> None:
    """Validate an ABI definition.

    Absent collections are fine, but every variant needs a member list and
    every struct a field list.
    """
    for variant in abi.variants or []:
        if variant.types is None:
            raise MalformedSchema(f"Variant {variant.name} has no member types")

    for struct in abi.structs or []:
        if struct.fields is None:
            raise MalformedSchema(f"Struct {struct.name} has no fields")


def from_dict(data: Any) -> Abi:
    """Build an ABI from decoded JSON."""
    if not isinstance(data, dict):
        raise MalformedSchema(f"ABI must be a JSON object, got {type(data).__name__}")

    try:
        abi = Abi.from_dict(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedSchema(f"Invalid ABI entry: {e}") from e

    if abi.version is None:
        abi.version = ""

    validate(abi)
    logger.debug(
        "Loaded ABI %s: %d types, %d variants, %d structs",
        abi.version,
        len(abi.types or []),
        len(abi.variants or []),
        len(abi.structs or []),
    )
    return abi


def parse(text: str) -> Abi:
    """Parse an ABI definition from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedSchema(f"ABI is not valid JSON: {e}") from e
    return from_dict(data)


def load(path: str | Path) -> Abi:
    """Load an ABI definition file."""
    with open(path, encoding="utf-8") as f:
        return parse(f.read())
