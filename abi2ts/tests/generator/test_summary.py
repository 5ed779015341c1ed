"""Tests for ABI summaries."""

import os

from abi2ts.generator import load
from abi2ts.generator.summary import DeclarationKind, summarize

FILE_DIR = os.path.dirname(os.path.realpath(__file__))


def describe_summarize():
    def counts_declarations(expect, pascal_options):
        summary = summarize(load(f"{FILE_DIR}/token.abi.json"), pascal_options)
        expect(summary.count(DeclarationKind.TYPE)) == 1
        expect(summary.count(DeclarationKind.VARIANT)) == 1
        expect(summary.count(DeclarationKind.STRUCT)) == 2

    def lists_used_builtins_in_registry_order(expect, pascal_options):
        summary = summarize(load(f"{FILE_DIR}/token.abi.json"), pascal_options)
        expect([b.name for b in summary.used_builtins]) == ["asset", "name", "uint32", "uint64"]

    def details_each_declaration(expect, pascal_options):
        summary = summarize(load(f"{FILE_DIR}/token.abi.json"), pascal_options)
        alias, variant, transfer, tagged = summary.declarations
        expect(alias.target_name) == "AccountName"
        expect(alias.detail) == "name"
        expect(variant.detail) == "2 members"
        expect(transfer.detail) == ""
        expect(tagged.detail) == "extends transfer"

    def counts_declaration_lines(expect, pascal_options):
        summary = summarize(load(f"{FILE_DIR}/token.abi.json"), pascal_options)
        expect(summary.line_count) == 12
