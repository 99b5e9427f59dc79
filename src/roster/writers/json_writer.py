"""
JSON writer for roster output.

Produces JSON with the same row layout as the Parquet output.
"""

from __future__ import annotations

import json
from pathlib import Path

from roster.models import BasePerson
from roster.workflow import Roster

from .serializers import person_to_record


class JSONWriter:
    """Writes person records to JSON files."""

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_person(self, person: BasePerson) -> Path:
        """
        Write one person record to ``<id>.json``.

        Returns:
            Path to the written JSON file
        """
        output_path = self.output_dir / f"{person.id}.json"
        with open(output_path, "w") as f:
            json.dump(person_to_record(person), f, indent=2)
        return output_path

    def write_roster(self, roster: Roster) -> Path:
        """
        Write every record of a roster to ``roster.json`` as a list.

        Returns:
            Path to the written JSON file
        """
        output_path = self.output_dir / "roster.json"
        with open(output_path, "w") as f:
            json.dump([person_to_record(r) for r in roster], f, indent=2)
        return output_path


def write_roster_to_json(roster: Roster, output_dir: str | Path) -> Path:
    """Convenience function to write a roster to JSON."""
    return JSONWriter(output_dir).write_roster(roster)
