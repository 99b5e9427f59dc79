"""
Identity token for person records.
"""

import uuid

from pydantic import Field

from roster.models.base import RecordModel


class UserId(RecordModel):
    """
    Opaque unique identifier of a person.

    Generated from a random UUID when no value is given.
    """

    value: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Opaque identity token",
        min_length=1,
    )

    def __str__(self) -> str:
        return self.value
