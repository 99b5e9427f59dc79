"""
Architect record builder.
"""

from typing import Callable, Optional

from roster.enums import PersonKind, TraitKind
from roster.models import Architect
from roster.workflow.builders.base import BuilderDefaults, Supplier, TraitBuilder


class ArchitectBuilder(TraitBuilder):
    """Builder for architects, tracking design patterns and languages."""

    name = "architect"
    aliases = ["arch"]
    kind = PersonKind.ARCHITECT
    record_type = Architect
    trait_fields = {
        TraitKind.LANGUAGE: "languages",
        TraitKind.PATTERN: "patterns",
    }
    defaults = BuilderDefaults(name="Lacy", age=32, profession="Software Architect")

    def add_design_pattern(self, supplier: Supplier) -> "ArchitectBuilder":
        """Append a design pattern produced by ``supplier``."""
        return self.add_trait(TraitKind.PATTERN, supplier)

    def add_language(self, supplier: Supplier) -> "ArchitectBuilder":
        """Append a programming language produced by ``supplier``."""
        return self.add_trait(TraitKind.LANGUAGE, supplier)


def build_architect(
    configure: Optional[Callable[[ArchitectBuilder], None]] = None,
    **details,
) -> Architect:
    """
    Build an architect record in one call.

    Example:
        lacy = build_architect(
            lambda b: b.add_design_pattern(lambda: "Builder Pattern")
                       .add_language(lambda: "Kotlin")
        )
    """
    builder = ArchitectBuilder(**details)
    if configure is not None:
        configure(builder)
    return builder.build()
