"""
Base class for fluent trait builders.

A builder stages trait values produced by zero-argument suppliers and
freezes them into an immutable record on build().
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Type

from roster.enums import PersonKind, TraitKind
from roster.models import BasePerson, Person, PersonDetails, UserId

logger = logging.getLogger(__name__)

Supplier = Callable[[], str]


@dataclass(frozen=True)
class BuilderDefaults:
    """Default common attributes for records produced by a builder."""

    name: str
    age: Optional[int] = None
    profession: Optional[str] = None


class TraitBuilder:
    """
    Accumulates ordered trait values and produces records.

    Each subclass declares which trait lists it tracks via ``trait_fields``,
    a mapping of trait kind to the record field receiving the list.

    The builder is never finalized: build() may be called repeatedly and
    each call returns an independent snapshot. Values added after a build
    only show up in later builds.

    Example:
        builder = DeveloperBuilder()
        builder.add_trait(TraitKind.LANGUAGE, lambda: "Go")
        builder.add_trait(TraitKind.LANGUAGE, lambda: "Rust")
        developer = builder.build()
        developer.languages  # ("Go", "Rust")
    """

    # Class attributes - override in subclasses
    name: str = "person"
    aliases: list[str] = []
    kind: PersonKind = PersonKind.PERSON
    record_type: Type[BasePerson] = Person
    trait_fields: dict[TraitKind, str] = {}
    defaults: BuilderDefaults = BuilderDefaults(name="Bob")
    preset_language: Optional[str] = None

    def __init__(
        self,
        friends: tuple[UserId, ...] = (),
        preset: Optional[str] = None,
        **overrides,
    ) -> None:
        """
        Initialize an empty builder.

        Args:
            friends: Identities of related people for built records
            preset: Language seeded before any caller additions; falls back
                    to the class-level ``preset_language``
            **overrides: Replacements for the default name, age, profession
        """
        self.details = dataclasses.replace(self.defaults, **overrides)
        self.friends = tuple(friends)
        self._traits: dict[TraitKind, list[str]] = {kind: [] for kind in self.trait_kinds}

        preset = preset if preset is not None else self.preset_language
        if preset is not None:
            self.add_trait(TraitKind.LANGUAGE, lambda: preset)

    @property
    def trait_kinds(self) -> tuple[TraitKind, ...]:
        """Trait kinds tracked by this builder."""
        return tuple(self.trait_fields)

    def tracks(self, kind: TraitKind | str) -> bool:
        """Check if this builder accumulates the given trait kind."""
        try:
            return TraitKind(kind) in self._traits
        except ValueError:
            return False

    def add_trait(self, kind: TraitKind | str, supplier: Supplier) -> "TraitBuilder":
        """
        Evaluate a supplier and append its value to a trait list.

        The supplier is called exactly once. If it raises, the exception
        propagates unchanged and the trait list is left as it was.

        Args:
            kind: Trait list to append to
            supplier: Zero-argument callable returning the value

        Returns:
            The builder, for chaining

        Raises:
            ValueError: If the builder does not track this trait kind
            TypeError: If the supplier does not return a string
        """
        if not self.tracks(kind):
            raise ValueError(f"{type(self).__name__} does not track '{kind}' traits")
        kind = TraitKind(kind)

        value = supplier()
        if not isinstance(value, str):
            raise TypeError(
                f"Trait supplier for '{kind.value}' returned {type(value).__name__}, expected str"
            )

        self._traits[kind].append(value)
        logger.debug(f"Added {kind.value} trait {value!r} to {self.details.name}")
        return self

    def traits(self, kind: TraitKind | str) -> tuple[str, ...]:
        """Snapshot of the values accumulated so far for a trait kind."""
        if not self.tracks(kind):
            raise ValueError(f"{type(self).__name__} does not track '{kind}' traits")
        return tuple(self._traits[TraitKind(kind)])

    def build(self) -> BasePerson:
        """
        Freeze the accumulated state into a new record.

        Each call generates a fresh identity and copies the trait lists,
        so records never share state with the builder or each other.

        Returns:
            Record of the builder's ``record_type``
        """
        details = PersonDetails(
            name=self.details.name,
            age=self.details.age,
            profession=self.details.profession,
            friends=self.friends,
        )
        fields = {
            field_name: tuple(self._traits[kind])
            for kind, field_name in self.trait_fields.items()
        }
        record = self.record_type(details=details, **fields)
        logger.debug(f"Built {record.kind} record {record.id} for {record.name}")
        return record


class PersonBuilder(TraitBuilder):
    """Builder for plain person records (no trait lists)."""

    name = "person"
    aliases = []
    kind = PersonKind.PERSON
    record_type = Person
    defaults = BuilderDefaults(name="Bob", age=25, profession="Kotlin Programmer")
