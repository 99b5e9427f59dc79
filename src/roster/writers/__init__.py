"""
Writers module for outputting person records to Parquet and JSON files.

Module structure:
- schemas.py: PyArrow schema definitions
- serializers.py: Record-to-row conversion
- parquet_writer.py: ParquetWriter class
- json_writer.py: JSONWriter class
"""

from pathlib import Path

from roster.workflow import Roster

from .json_writer import JSONWriter, write_roster_to_json
from .parquet_writer import ParquetWriter
from .schemas import PERSON_SCHEMA
from .serializers import person_to_record

__all__ = [
    "PERSON_SCHEMA",
    "person_to_record",
    "ParquetWriter",
    "JSONWriter",
    "write_roster_to_parquet",
    "write_roster_to_json",
]


def write_roster_to_parquet(roster: Roster, output_dir: str | Path) -> dict[str, Path]:
    """
    Convenience function to write every record of a roster.

    Args:
        roster: The roster to write
        output_dir: Directory for output files

    Returns:
        Dict mapping record ids to written file paths
    """
    writer = ParquetWriter(output_dir)
    return {str(record.id): writer.write_person(record) for record in roster}
