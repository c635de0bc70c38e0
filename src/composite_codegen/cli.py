"""
Command-line interface for composite-codegen.
Reads a composite value as JSON and prints the generated JavaScript.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from composite_codegen.errors import CodegenError
from composite_codegen.generator import classify, generate
from composite_codegen.options import GenerationOptions
from composite_codegen.version import __version__

cli = typer.Typer(
	name="composite-codegen",
	help="Generate JavaScript code from low-code composite values",
	no_args_is_help=True,
)


def _load_value(source: str, console: Console) -> Any:
	try:
		text = sys.stdin.read() if source == "-" else Path(source).read_text()
	except OSError as exc:
		console.log(f"❌ Cannot read {source}: {exc}")
		raise typer.Exit(1) from None
	try:
		return json.loads(text)
	except json.JSONDecodeError as exc:
		console.log(f"❌ Invalid JSON in {source}: {exc}")
		raise typer.Exit(1) from None


@cli.command("generate")
def generate_cmd(
	source: str = typer.Argument(..., help="JSON file with the composite value, or '-' for stdin"),
	max_depth: int = typer.Option(128, "--max-depth", help="Maximum nesting depth"),
	strict_slots: bool = typer.Option(
		False,
		"--strict-slots",
		help="Fail on JSSlot values instead of emitting an empty string",
	),
):
	"""Generate JavaScript code for a composite value."""
	console = Console(stderr=True)
	value = _load_value(source, console)
	options = GenerationOptions(
		max_depth=max_depth,
		on_missing_node_generator="fail" if strict_slots else "degrade",
	)
	try:
		code = generate(value, None, options)
	except CodegenError as exc:
		console.log(f"❌ {exc}")
		raise typer.Exit(1) from None
	typer.echo(code)


@cli.command("classify")
def classify_cmd(
	source: str = typer.Argument(..., help="JSON file with the composite value, or '-' for stdin"),
):
	"""Print the kind of the top-level composite value."""
	console = Console(stderr=True)
	value = _load_value(source, console)
	try:
		kind = classify(value)
	except CodegenError as exc:
		console.log(f"❌ {exc}")
		raise typer.Exit(1) from None
	typer.echo(kind)


@cli.command("version")
def version_cmd():
	"""Print the composite-codegen version."""
	typer.echo(__version__)


def main():
	cli()


if __name__ == "__main__":
	main()
