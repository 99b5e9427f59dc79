"""
The stock cast of characters.
"""

from roster.workflow.builders import PersonBuilder, build_architect, build_developer
from roster.workflow.roster import Roster


def default_cast() -> Roster:
    """
    Build the stock cast: Bob, Purl and Lacy.

    Bob is a plain person, Purl a developer with no languages yet, and
    Lacy an architect who knows the builder pattern and Kotlin.
    """
    bob = PersonBuilder().build()
    purl = build_developer()
    lacy = build_architect(
        lambda lacy: lacy.add_design_pattern(lambda: "Builder Pattern").add_language(
            lambda: "Kotlin"
        )
    )
    return Roster([bob, purl, lacy])
