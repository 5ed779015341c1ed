"""Tests for ABI loading."""

import os

import pytest

from abi2ts.generator import load, parse
from abi2ts.generator.errors import MalformedSchema

FILE_DIR = os.path.dirname(os.path.realpath(__file__))


def describe_parse():
    def parses_all_collections(expect):
        abi = load(f"{FILE_DIR}/token.abi.json")
        expect(abi.version) == "eosio::abi/1.1"
        expect(abi.types[0].new_type_name) == "account_name"
        expect(abi.types[0].type) == "name"
        expect(abi.variants[0].types) == ["uint64", "string"]
        expect(len(abi.structs)) == 2
        expect(abi.structs[1].base) == "transfer"
        expect(abi.structs[1].fields[0].type) == "uint32?"

    def treats_missing_collections_as_absent(expect):
        abi = parse('{"version": "eosio::abi/1.0"}')
        expect(abi.types) == None
        expect(abi.variants) == None
        expect(abi.structs) == None

    def parses_empty_object(expect):
        abi = parse("{}")
        expect(abi.version) == ""

    def ignores_unrelated_sections(expect):
        abi = parse('{"version": "v", "actions": [], "tables": [], "ricardian_clauses": []}')
        expect(abi.version) == "v"

    def keeps_missing_base_empty(expect):
        abi = parse('{"structs": [{"name": "s", "fields": []}]}')
        expect(abi.structs[0].base) == ""


def describe_parse_errors():
    def rejects_invalid_json(expect):
        with pytest.raises(MalformedSchema):
            parse("{not json")

    def rejects_non_objects(expect):
        with pytest.raises(MalformedSchema):
            parse("[]")

    def rejects_struct_without_fields(expect):
        with pytest.raises(MalformedSchema) as e:
            parse('{"structs": [{"name": "transfer", "base": ""}]}')
        expect("transfer" in str(e.value)) == True

    def rejects_variant_without_types(expect):
        with pytest.raises(MalformedSchema) as e:
            parse('{"variants": [{"name": "any_value"}]}')
        expect("any_value" in str(e.value)) == True

    def rejects_non_object_entries(expect):
        with pytest.raises(MalformedSchema):
            parse('{"structs": ["transfer"]}')
        with pytest.raises(MalformedSchema):
            parse('{"types": [42]}')


def describe_parse_version():
    def treats_null_version_as_empty(expect):
        abi = parse('{"version": null}')
        expect(abi.version) == ""
