"""
Human-readable rendering of person records.
"""

from typing import Any, Callable, Iterable

import click

from roster.models import BasePerson


def _render(value: Any) -> str:
    if value is None:
        return "-"
    return str(value)


def _render_list(values: Iterable[Any]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def describe(record: BasePerson) -> str:
    """
    Format a record as a single line.

    Fields appear as ``name age profession [friends]`` followed by each
    trait list the variant carries. Absent values render as ``-``.
    """
    parts = [
        record.name,
        _render(record.age),
        _render(record.profession),
        _render_list(record.friends),
    ]
    for values in record.traits().values():
        parts.append(_render_list(values))
    return " ".join(parts)


def print_details(record: BasePerson, echo: Callable[[str], Any] = click.echo) -> None:
    """Write the description of a record to the output."""
    echo(describe(record))
