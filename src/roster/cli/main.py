"""
Main CLI entry point for person-roster using Click.

Usage:
    roster build developer [--language LANG]... [--preset LANG] [--json]
    roster build architect [--pattern NAME]... [--language LANG]... [--json]
    roster cast [--json] [--output DIR --format parquet|json]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from roster import __version__
from roster.enums import TraitKind
from roster.formatting import print_details
from roster.models import BasePerson
from roster.workflow import BuilderRegistry, Roster, default_cast
from roster.writers import JSONWriter, ParquetWriter, person_to_record


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class Config:
    """Shared configuration for CLI commands."""

    def __init__(self) -> None:
        self.verbose = False
        self.debug = False


pass_config = click.make_pass_decorator(Config, ensure=True)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.version_option(version=__version__, prog_name="roster")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Build immutable person records from traits."""
    ctx.ensure_object(Config)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    setup_logging(verbose=verbose, debug=debug)


def _write_output(records: list[BasePerson], output: str, fmt: str) -> list[Path]:
    """Write records to the output directory in the chosen format."""
    if fmt == "parquet":
        writer = ParquetWriter(output)
        return [writer.write_person(record) for record in records]
    return [JSONWriter(output).write_roster(Roster(records))]


@cli.command()
@click.argument("kind", type=click.Choice(BuilderRegistry.list_builders(), case_sensitive=False))
@click.option("--name", "-n", help="Display name (defaults per kind)")
@click.option("--age", "-a", type=int, help="Age in years")
@click.option("--profession", "-p", help="Profession label")
@click.option(
    "--language",
    "-l",
    "languages",
    multiple=True,
    help="Known programming language (can be specified multiple times)",
)
@click.option(
    "--pattern",
    "patterns",
    multiple=True,
    help="Known design pattern (can be specified multiple times)",
)
@click.option("--preset", help="Language seeded before any --language")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--output", "-o", type=click.Path(), help="Directory to write the record to")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["parquet", "json"]),
    default="parquet",
    show_default=True,
    help="Output file format",
)
@pass_config
def build(
    config: Config,
    kind: str,
    name: Optional[str],
    age: Optional[int],
    profession: Optional[str],
    languages: tuple[str, ...],
    patterns: tuple[str, ...],
    preset: Optional[str],
    as_json: bool,
    output: Optional[str],
    fmt: str,
) -> None:
    """Build a single person record.

    Example:
        roster build architect --pattern "Builder Pattern" -l Kotlin
    """
    builder_class = BuilderRegistry.get_builder(kind)

    overrides = {}
    if name is not None:
        overrides["name"] = name
    if age is not None:
        overrides["age"] = age
    if profession is not None:
        overrides["profession"] = profession

    try:
        builder = builder_class(preset=preset, **overrides)
        for pattern in patterns:
            builder.add_trait(TraitKind.PATTERN, lambda: pattern)
        for language in languages:
            builder.add_trait(TraitKind.LANGUAGE, lambda: language)
        record = builder.build()
    except (ValueError, ValidationError) as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(person_to_record(record), indent=2))
    else:
        print_details(record)

    if output:
        for path in _write_output([record], output, fmt):
            click.echo(f"Wrote: {path}", err=True)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--output", "-o", type=click.Path(), help="Directory to write the cast to")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["parquet", "json"]),
    default="parquet",
    show_default=True,
    help="Output file format",
)
@pass_config
def cast(config: Config, as_json: bool, output: Optional[str], fmt: str) -> None:
    """Print the stock cast (Bob, Purl and Lacy).

    Everyone in the cast is befriended with Bob before printing.
    """
    roster = default_cast()
    bob, *others = roster.records
    for other in others:
        roster.befriend(bob.id, other.id)

    if as_json:
        click.echo(json.dumps([person_to_record(r) for r in roster], indent=2))
    elif config.verbose:
        click.echo(roster.summary())
    else:
        for record in roster:
            print_details(record)
        oldest = roster.oldest()
        if oldest:
            click.echo(f"Oldest: {oldest.name} ({oldest.age})")

    if output:
        for path in _write_output(roster.records, output, fmt):
            click.echo(f"Wrote: {path}", err=True)


def app(args: Optional[list[str]] = None) -> int:
    """
    Main application entry point (for testing).

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    try:
        cli(args, standalone_mode=False)
        return 0
    except click.ClickException as e:
        e.show()
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
