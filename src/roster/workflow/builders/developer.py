"""
Developer record builder.
"""

from typing import Callable, Optional

from roster.enums import PersonKind, TraitKind
from roster.models import Developer
from roster.workflow.builders.base import BuilderDefaults, Supplier, TraitBuilder


class DeveloperBuilder(TraitBuilder):
    """Builder for developers and their known programming languages."""

    name = "developer"
    aliases = ["dev"]
    kind = PersonKind.DEVELOPER
    record_type = Developer
    trait_fields = {TraitKind.LANGUAGE: "languages"}
    defaults = BuilderDefaults(name="Purl", age=25, profession="Software Developer")

    def add_language(self, supplier: Supplier) -> "DeveloperBuilder":
        """Append a programming language produced by ``supplier``."""
        return self.add_trait(TraitKind.LANGUAGE, supplier)


class KotlinDeveloperBuilder(DeveloperBuilder):
    """Developer builder whose first language is always Kotlin."""

    name = "kotlin-developer"
    aliases = ["kotlin"]
    preset_language = "Kotlin"


def build_developer(
    configure: Optional[Callable[[DeveloperBuilder], None]] = None,
    builder_class: type[DeveloperBuilder] = DeveloperBuilder,
    **details,
) -> Developer:
    """
    Build a developer record in one call.

    Args:
        configure: Called with the fresh builder to add traits
        builder_class: Builder to instantiate
        **details: Forwarded to the builder constructor

    Returns:
        The built Developer record
    """
    builder = builder_class(**details)
    if configure is not None:
        configure(builder)
    return builder.build()
