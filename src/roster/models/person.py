"""
Person record variants.

A person is one of three tagged variants sharing a common attribute set:

- Person: the common attributes only
- Developer: adds known programming languages
- Architect: adds known design patterns and programming languages

The common attributes live in PersonDetails and are composed into each
variant rather than inherited.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from roster.enums import PersonKind, TraitKind
from roster.models.base import RecordModel
from roster.models.identity import UserId


class PersonDetails(RecordModel):
    """
    Attributes shared by every record variant.

    Attributes:
        id: Unique identity of the person
        name: Display name
        age: Age in years, if known
        profession: Profession label, if known
        friends: Identities of related people, in insertion order
    """

    id: UserId = Field(
        default_factory=UserId,
        description="Unique identity of the person",
    )

    name: str = Field(
        ...,
        description="Display name",
    )

    age: Optional[int] = Field(
        default=None,
        description="Age in years",
        ge=0,
    )

    profession: Optional[str] = Field(
        default=None,
        description="Profession label",
    )

    friends: tuple[UserId, ...] = Field(
        default=(),
        description="Identities of related people",
    )


class BasePerson(RecordModel):
    """Accessors shared by the record variants."""

    details: PersonDetails

    @property
    def id(self) -> UserId:
        return self.details.id

    @property
    def name(self) -> str:
        return self.details.name

    @property
    def age(self) -> Optional[int]:
        return self.details.age

    @property
    def profession(self) -> Optional[str]:
        return self.details.profession

    @property
    def friends(self) -> tuple[UserId, ...]:
        return self.details.friends

    def traits(self) -> dict[TraitKind, tuple[str, ...]]:
        """Trait lists carried by this variant, keyed by kind."""
        return {}

    def with_friends(self, *friend_ids: UserId):
        """
        Return a copy listing additional friends.

        Ids already present are not repeated. The original record is
        left untouched.

        Args:
            *friend_ids: Identities to append

        Returns:
            New record of the same variant
        """
        friends = list(self.details.friends)
        for friend_id in friend_ids:
            if friend_id not in friends:
                friends.append(friend_id)
        details = self.details.model_copy(update={"friends": tuple(friends)})
        return self.model_copy(update={"details": details})

    def __str__(self) -> str:
        return f"{self.name} ({self.kind})"


class Person(BasePerson):
    """A person with no trait lists."""

    kind: Literal["person"] = PersonKind.PERSON.value


class Developer(BasePerson):
    """
    A developer with known programming languages.

    Attributes:
        languages: Known programming languages, in the order learned
    """

    kind: Literal["developer"] = PersonKind.DEVELOPER.value

    languages: tuple[str, ...] = Field(
        default=(),
        description="Known programming languages",
    )

    def traits(self) -> dict[TraitKind, tuple[str, ...]]:
        return {TraitKind.LANGUAGE: self.languages}


class Architect(BasePerson):
    """
    An architect with known design patterns and programming languages.

    Attributes:
        patterns: Known design patterns
        languages: Known programming languages
    """

    kind: Literal["architect"] = PersonKind.ARCHITECT.value

    patterns: tuple[str, ...] = Field(
        default=(),
        description="Known design patterns",
    )

    languages: tuple[str, ...] = Field(
        default=(),
        description="Known programming languages",
    )

    def traits(self) -> dict[TraitKind, tuple[str, ...]]:
        return {
            TraitKind.LANGUAGE: self.languages,
            TraitKind.PATTERN: self.patterns,
        }


PersonRecord = Annotated[
    Union[Person, Developer, Architect],
    Field(discriminator="kind"),
]
