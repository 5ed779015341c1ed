"""abi2ts - TypeScript typings generator for EOSIO ABI definitions."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("abi2ts")
except PackageNotFoundError:
    __version__ = "(local)"
