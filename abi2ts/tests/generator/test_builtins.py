"""Tests for the built-in type registry."""

from abi2ts.generator.builtins import (
    BUILTINS,
    PASSTHROUGH_TYPES,
    BuiltinName,
    is_builtin,
    lookup,
    registry_index,
)


def describe_registry():
    def lists_every_builtin_name_once(expect):
        names = [b.name for b in BUILTINS]
        expect(len(names)) == len(set(names))
        expect(names) == [str(n) for n in BuiltinName]

    def keeps_declaration_order(expect):
        expect(BUILTINS[0].name) == "asset"
        expect(BUILTINS[1].name) == "name"
        expect(BUILTINS[-1].name) == "float128"
        expect(registry_index(lookup("int8")) < registry_index(lookup("uint8"))) == True

    def maps_wide_integers_to_strings(expect):
        expect(lookup("int64").type) == "number | string"
        expect(lookup("uint64").type) == "number | string"
        expect(lookup("int128").type) == "string"
        expect(lookup("uint128").type) == "string"

    def maps_floats(expect):
        expect(lookup("float32").type) == "number"
        expect(lookup("float64").type) == "number"
        expect(lookup("float128").type) == "string"

    def maps_bytes_to_any_binary_representation(expect):
        expect(lookup("bytes").type) == "string | number[] | Uint8Array"


def describe_lookup():
    def matches_exact_names(expect):
        expect(lookup("checksum256").name) == "checksum256"
        expect(is_builtin("symbol_code")) == True

    def does_not_match_prefixes_or_case(expect):
        expect(lookup("uint")) == None
        expect(lookup("uint32x")) == None
        expect(lookup("Name")) == None
        expect(lookup("name[]")) == None

    def does_not_treat_passthroughs_as_builtins(expect):
        for name in PASSTHROUGH_TYPES:
            expect(lookup(name)) == None
