"""
Record building workflow.

This module provides:
- Fluent builders that turn supplier results into records
- A registry for picking builders by name
- A roster that collects and links built records
"""

from .builders import (
    ArchitectBuilder,
    BuilderDefaults,
    DeveloperBuilder,
    KotlinDeveloperBuilder,
    PersonBuilder,
    TraitBuilder,
    build_architect,
    build_developer,
)
from .cast import default_cast
from .registry import BuilderRegistry
from .roster import Roster

__all__ = [
    "TraitBuilder",
    "BuilderDefaults",
    "PersonBuilder",
    "DeveloperBuilder",
    "KotlinDeveloperBuilder",
    "ArchitectBuilder",
    "build_developer",
    "build_architect",
    "BuilderRegistry",
    "Roster",
    "default_cast",
]
