"""
Registry of record builders.

Maps builder names and aliases to builder classes so callers (such as the
CLI) can pick a builder from a string.
"""

from __future__ import annotations

from typing import Type

from roster.enums import PersonKind
from roster.workflow.builders import (
    ArchitectBuilder,
    DeveloperBuilder,
    KotlinDeveloperBuilder,
    PersonBuilder,
    TraitBuilder,
)


class BuilderRegistry:
    """
    Registry of builder classes.

    Maintains a mapping of builder names (and aliases) to classes.
    """

    _builders: dict[str, Type[TraitBuilder]] = {}

    @classmethod
    def register(cls, builder: Type[TraitBuilder]) -> Type[TraitBuilder]:
        """
        Register a builder class.

        Can be used as a decorator:
            @BuilderRegistry.register
            class MyBuilder(TraitBuilder):
                ...

        Args:
            builder: The builder class

        Returns:
            The builder class (for decorator use)
        """
        cls._builders[builder.name] = builder
        for alias in builder.aliases:
            cls._builders[alias] = builder
        return builder

    @classmethod
    def get_builder(cls, name: str) -> Type[TraitBuilder]:
        """
        Get the builder registered under a name or alias.

        Raises:
            KeyError: If nothing is registered under the name
        """
        key = name.lower()
        if key not in cls._builders:
            known = ", ".join(cls.list_builders())
            raise KeyError(f"Unknown builder '{name}' (known: {known})")
        return cls._builders[key]

    @classmethod
    def list_builders(cls) -> list[str]:
        """List all registered builder names."""
        return sorted(set(b.name for b in cls._builders.values()))

    @classmethod
    def list_kinds(cls) -> list[PersonKind]:
        """List the record kinds produced by registered builders."""
        kinds = set(b.kind for b in cls._builders.values())
        return [kind for kind in PersonKind if kind in kinds]


for _builder in (PersonBuilder, DeveloperBuilder, KotlinDeveloperBuilder, ArchitectBuilder):
    BuilderRegistry.register(_builder)
