"""
PyArrow schema definitions for roster tables.
"""

import pyarrow as pa

# Schema for person records (all variants share one table)
PERSON_SCHEMA = pa.schema(
    [
        ("id", pa.string()),
        ("kind", pa.string()),
        ("name", pa.string()),
        ("age", pa.int32()),
        ("profession", pa.string()),
        ("friends", pa.list_(pa.string())),
        # Trait lists (null when the variant does not carry them)
        pa.field(
            "languages",
            pa.list_(pa.string()),
            metadata={b"description": b"Known programming languages"},
        ),
        pa.field(
            "patterns",
            pa.list_(pa.string()),
            metadata={b"description": b"Known design patterns"},
        ),
    ]
)

