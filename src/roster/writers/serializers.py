"""
Serialization utilities for converting person records to flat rows.
"""

from typing import Any

from roster.enums import TraitKind
from roster.models import BasePerson


def person_to_record(person: BasePerson) -> dict[str, Any]:
    """
    Convert a person record to a flat dict matching PERSON_SCHEMA.

    Identities become plain strings. Trait lists the variant does not
    carry are None rather than empty.
    """
    traits = person.traits()
    languages = traits.get(TraitKind.LANGUAGE)
    patterns = traits.get(TraitKind.PATTERN)

    return {
        "id": str(person.id),
        "kind": person.kind,
        "name": person.name,
        "age": person.age,
        "profession": person.profession,
        "friends": [str(f) for f in person.friends],
        "languages": list(languages) if languages is not None else None,
        "patterns": list(patterns) if patterns is not None else None,
    }
