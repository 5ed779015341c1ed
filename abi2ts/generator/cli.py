"""Command-line interface for abi2ts typings generation."""

from __future__ import annotations

import json
import logging
import sys
from typing import IO

import click
from rich.console import Console
from rich.table import Table

from abi2ts._logging import configure_logging
from abi2ts.generator import parse, render
from abi2ts.generator.errors import Abi2TsError
from abi2ts.generator.summary import AbiSummary, DeclarationKind, summarize
from abi2ts.generator.types import TransformOptions
from abi2ts.generator.util import FORMATTERS


def _options(formatter: str, indent: str, export: bool, namespace: str | None) -> TransformOptions:
    if formatter not in FORMATTERS:
        print(f"Unknown formatter: {formatter}")
        sys.exit(1)
    return TransformOptions(
        type_formatter=FORMATTERS[formatter],
        indent=indent,
        export=export,
        namespace=namespace or None,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """EOSIO ABI to TypeScript typings generator."""
    if verbose:
        configure_logging(level=logging.DEBUG)


@cli.command()
@click.option(
    "--input", "-i", "input_file", type=click.File("r", encoding="utf-8"), default="-",
    help="Input ABI file, - for stdin",
)
@click.option(
    "--output", "-o", "output_file", type=click.File("w", encoding="utf-8"), default="-",
    help="Output file, - for stdout",
)
@click.option("--export", "-e", is_flag=True, default=False, help="Export types and interfaces")
@click.option("--namespace", "-n", default=None, help="Wrap declarations in a namespace")
@click.option("--indent", default="    ", show_default=True, help="Indentation string")
@click.option(
    "--formatter", "-f", default="pascal", help="Type name format (pascal, camel, identity)"
)
@click.option(
    "--strict", is_flag=True, default=False, help="Fail on references to undeclared types"
)
def gen(
    input_file: IO[str],
    output_file: IO[str],
    export: bool,
    namespace: str | None,
    indent: str,
    formatter: str,
    strict: bool,
) -> None:
    """Generate TypeScript typings from an ABI file."""
    options = _options(formatter, indent, export, namespace)

    try:
        abi = parse(input_file.read())
        generated_file = render(abi, options, strict=strict)
    except Abi2TsError as e:
        raise click.ClickException(str(e)) from e

    output_file.write(generated_file)


@cli.command()
@click.option(
    "--input", "-i", "input_file", type=click.File("r", encoding="utf-8"), required=True,
    help="Input ABI file",
)
@click.option("--formatter", "-f", default="pascal", help="Type name format (pascal, camel, identity)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: IO[str], formatter: str, output_json: bool) -> None:
    """Display the declarations and built-ins an ABI produces."""
    options = _options(formatter, "    ", False, None)

    try:
        summary = summarize(parse(input_file.read()), options)
    except Abi2TsError as e:
        raise click.ClickException(str(e)) from e

    if output_json:
        _output_json(summary)
    else:
        _output_plain(summary)


def _output_json(summary: AbiSummary) -> None:
    """Output ABI info as JSON."""
    data: dict = {
        "version": summary.version,
        "declarations": {},
        "builtins": {},
        "lines": summary.line_count,
    }

    for decl in summary.declarations:
        data["declarations"][decl.name] = {
            "name": decl.target_name,
            "kind": decl.kind.value,
            "detail": decl.detail,
        }

    for builtin in summary.used_builtins:
        data["builtins"][builtin.name] = builtin.type

    print(json.dumps(data, indent=2))


def _output_plain(summary: AbiSummary) -> None:
    """Output ABI info using rich text formatting."""
    console = Console()

    console.print("[bold cyan]ABI[/bold cyan]")
    abi_table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    abi_table.add_column("Label", style="dim")
    abi_table.add_column("Value", style="white")

    abi_table.add_row("Version", summary.version or "unknown")
    for kind in DeclarationKind:
        abi_table.add_row(kind.value.capitalize(), str(summary.count(kind)))
    abi_table.add_row("Lines", str(summary.line_count))

    console.print(abi_table)
    console.print()

    console.print("[bold cyan]Declarations[/bold cyan]")
    decl_table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    decl_table.add_column("Name", style="white")
    decl_table.add_column("TypeScript", style="yellow")
    decl_table.add_column("Kind", style="dim")
    decl_table.add_column("Detail", style="green")

    for decl in summary.declarations:
        decl_table.add_row(decl.name, decl.target_name, decl.kind.value, decl.detail)

    console.print(decl_table)
    console.print()

    console.print("[bold cyan]Built-ins[/bold cyan]")
    builtin_table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    builtin_table.add_column("Name", style="dim")
    builtin_table.add_column("Type", style="white")

    for builtin in summary.used_builtins:
        builtin_table.add_row(builtin.name, builtin.type)

    console.print(builtin_table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
