"""
Fluent record builders.

Each builder stages trait values from suppliers and produces immutable
records (see roster.models).
"""

from roster.workflow.builders.architect import ArchitectBuilder, build_architect
from roster.workflow.builders.base import (
    BuilderDefaults,
    PersonBuilder,
    Supplier,
    TraitBuilder,
)
from roster.workflow.builders.developer import (
    DeveloperBuilder,
    KotlinDeveloperBuilder,
    build_developer,
)

__all__ = [
    "BuilderDefaults",
    "Supplier",
    "TraitBuilder",
    "PersonBuilder",
    "DeveloperBuilder",
    "KotlinDeveloperBuilder",
    "ArchitectBuilder",
    "build_developer",
    "build_architect",
]
