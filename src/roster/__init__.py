"""
Person Roster - fluent builders for immutable person records.

This package provides record types for people (plain persons, developers,
architects), builders that accumulate trait lists from suppliers, and
writers that export the resulting records.
"""

__version__ = "0.1.0"

from roster.enums import PersonKind, TraitKind
from roster.formatting import describe, print_details
from roster.models import (
    Architect,
    Developer,
    Person,
    PersonDetails,
    UserId,
)
from roster.workflow import (
    ArchitectBuilder,
    BuilderRegistry,
    DeveloperBuilder,
    KotlinDeveloperBuilder,
    PersonBuilder,
    Roster,
    build_architect,
    build_developer,
    default_cast,
)

__all__ = [
    # Enums
    "PersonKind",
    "TraitKind",
    # Records
    "UserId",
    "PersonDetails",
    "Person",
    "Developer",
    "Architect",
    # Builders
    "PersonBuilder",
    "DeveloperBuilder",
    "KotlinDeveloperBuilder",
    "ArchitectBuilder",
    "BuilderRegistry",
    "build_developer",
    "build_architect",
    # Roster
    "Roster",
    "default_cast",
    # Formatting
    "describe",
    "print_details",
]
