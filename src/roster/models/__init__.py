"""
Pydantic models for person records.

- UserId: identity token
- PersonDetails: shared attributes
- Person / Developer / Architect: record variants
"""

from pydantic import TypeAdapter

from roster.enums import PersonKind, TraitKind
from roster.models.base import RecordModel
from roster.models.identity import UserId
from roster.models.person import (
    Architect,
    BasePerson,
    Developer,
    Person,
    PersonDetails,
    PersonRecord,
)

person_record_adapter = TypeAdapter(PersonRecord)

__all__ = [
    "RecordModel",
    "UserId",
    "PersonDetails",
    "BasePerson",
    "Person",
    "Developer",
    "Architect",
    "PersonRecord",
    "person_record_adapter",
    "PersonKind",
    "TraitKind",
]
