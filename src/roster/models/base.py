"""
Base model for all roster records.

Provides the shared pydantic configuration and serialization helpers.
"""

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """
    Base model for immutable roster records.

    Provides:
    - Frozen instances (no attribute assignment after construction)
    - Enum values in serialization
    - JSON serialization helpers
    """

    model_config = ConfigDict(
        # Records are snapshots
        frozen=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Reject unknown fields
        extra="forbid",
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Convert to JSON string."""
        return self.model_dump_json()
