"""
Enums for person records.

These enums define the record variants and the trait lists they carry.
"""

from enum import Enum


class PersonKind(str, Enum):
    """Record variants."""

    PERSON = "person"
    DEVELOPER = "developer"
    ARCHITECT = "architect"


class TraitKind(str, Enum):
    """Trait lists accumulated by builders."""

    LANGUAGE = "language"
    PATTERN = "pattern"
