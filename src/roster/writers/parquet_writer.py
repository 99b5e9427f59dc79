"""
Parquet file writer for roster output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from roster.models import BasePerson
from roster.workflow import Roster

from .schemas import PERSON_SCHEMA
from .serializers import person_to_record

logger = logging.getLogger(__name__)


class ParquetWriter:
    """
    Writes person records to Parquet files.

    Supports partitioned output by record kind.

    Example:
        writer = ParquetWriter("/data/roster")
        writer.write(developer)

        # Or write a whole roster
        writer.write(roster)
    """

    def __init__(self, output_dir: str | Path, partition_by_kind: bool = True):
        """
        Initialize the writer with an output directory.

        Args:
            output_dir: Base directory for output files
            partition_by_kind: Whether to partition by record kind (default True)
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.partition_by_kind = partition_by_kind

    def _get_partition_path(self, kind: str | None = None) -> Path:
        parts = [self.output_dir, "person"]
        if kind and self.partition_by_kind:
            parts.append(f"kind={kind}")
        return Path(*parts)

    def write(self, model: BasePerson | Roster, **kwargs: Any) -> Path | dict[str, str]:
        """
        Write a record or a whole roster to Parquet.

        Args:
            model: The record or Roster to write

        Returns:
            Path to the written file (for a record), or
            Dict mapping record ids to paths (for a Roster)

        Raises:
            TypeError: For anything that is not a record or Roster
        """
        if isinstance(model, Roster):
            return {str(record.id): str(self.write_person(record)) for record in model}
        if isinstance(model, BasePerson):
            return self.write_person(model)
        raise TypeError(f"Unsupported model type: {type(model)}")

    def write_person(self, person: BasePerson) -> Path:
        """
        Write a single person record to Parquet.

        Returns:
            Path to the written file
        """
        record = person_to_record(person)
        table = pa.Table.from_pylist([record], schema=PERSON_SCHEMA)

        partition_dir = self._get_partition_path(person.kind)
        partition_dir.mkdir(parents=True, exist_ok=True)

        output_path = partition_dir / f"{person.id}.parquet"
        pq.write_table(table, output_path)
        logger.debug(f"Wrote {person.name} to {output_path}")
        return output_path

    def write_batch(self, records: list[BasePerson]) -> Path:
        """
        Write several records into one unpartitioned Parquet file.

        Returns:
            Path to the written file
        """
        table = pa.Table.from_pylist(
            [person_to_record(r) for r in records], schema=PERSON_SCHEMA
        )
        output_path = self.output_dir / "roster.parquet"
        pq.write_table(table, output_path)
        logger.debug(f"Wrote {len(records)} records to {output_path}")
        return output_path
