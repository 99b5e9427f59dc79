"""
Tests for the fluent record builders.
"""

import pytest

from roster.enums import PersonKind, TraitKind
from roster.models import Architect, Developer, Person
from roster.workflow import (
    ArchitectBuilder,
    BuilderRegistry,
    DeveloperBuilder,
    KotlinDeveloperBuilder,
    PersonBuilder,
    build_architect,
    build_developer,
)


class TestAddTrait:
    """Tests for add_trait."""

    def test_order_preserved(self):
        """Test that values keep the order they were added in."""
        builder = DeveloperBuilder()
        builder.add_trait(TraitKind.LANGUAGE, lambda: "Go")
        builder.add_trait(TraitKind.LANGUAGE, lambda: "Rust")
        assert builder.build().languages == ("Go", "Rust")

    def test_duplicates_kept(self):
        """Test that duplicate values are permitted."""
        builder = DeveloperBuilder().add_language(lambda: "Go").add_language(lambda: "Go")
        assert builder.build().languages == ("Go", "Go")

    def test_accepts_string_kind(self):
        """Test that trait kinds can be passed by value."""
        builder = ArchitectBuilder()
        builder.add_trait("pattern", lambda: "Observer")
        assert builder.traits(TraitKind.PATTERN) == ("Observer",)

    def test_supplier_called_once(self):
        """Test that the supplier is evaluated exactly once, immediately."""
        calls = []

        def supplier():
            calls.append(1)
            return "Go"

        builder = DeveloperBuilder()
        builder.add_language(supplier)
        assert calls == [1]
        builder.build()
        assert calls == [1]

    def test_supplier_failure_propagates(self):
        """Test that a failing supplier leaves earlier values in place."""
        builder = DeveloperBuilder()
        builder.add_language(lambda: "Go")

        def broken():
            raise RuntimeError("no language today")

        with pytest.raises(RuntimeError, match="no language today"):
            builder.add_language(broken)

        assert builder.traits(TraitKind.LANGUAGE) == ("Go",)
        assert builder.build().languages == ("Go",)

    def test_untracked_kind_rejected(self):
        """Test that an untracked kind raises before calling the supplier."""
        calls = []
        builder = DeveloperBuilder()
        with pytest.raises(ValueError):
            builder.add_trait(TraitKind.PATTERN, lambda: calls.append(1) or "Observer")
        assert calls == []

    def test_non_string_value_rejected(self):
        """Test that a supplier returning a non-string is rejected."""
        builder = DeveloperBuilder()
        with pytest.raises(TypeError):
            builder.add_language(lambda: 42)
        assert builder.traits(TraitKind.LANGUAGE) == ()


class TestBuild:
    """Tests for build."""

    def test_empty_builder(self):
        """Test that building with no additions gives empty trait lists."""
        lacy = ArchitectBuilder().build()
        assert isinstance(lacy, Architect)
        assert lacy.patterns == ()
        assert lacy.languages == ()

    def test_defaults(self):
        """Test the default common attributes of each builder."""
        purl = DeveloperBuilder().build()
        assert (purl.name, purl.age, purl.profession) == ("Purl", 25, "Software Developer")
        lacy = ArchitectBuilder().build()
        assert (lacy.name, lacy.age, lacy.profession) == ("Lacy", 32, "Software Architect")
        bob = PersonBuilder().build()
        assert isinstance(bob, Person)
        assert bob.profession == "Kotlin Programmer"

    def test_overrides(self):
        """Test that constructor keywords replace the defaults."""
        dev = DeveloperBuilder(name="Ada", age=None, profession=None).build()
        assert dev.name == "Ada"
        assert dev.age is None
        assert dev.profession is None

    def test_repeated_builds_are_independent(self):
        """Test that two builds share contents but not identity."""
        builder = DeveloperBuilder().add_language(lambda: "Go")
        first = builder.build()
        second = builder.build()
        assert first.languages == second.languages
        assert first.id != second.id

    def test_add_after_build(self):
        """Test that later additions do not leak into earlier records."""
        builder = DeveloperBuilder().add_language(lambda: "Go")
        first = builder.build()
        builder.add_language(lambda: "Rust")
        second = builder.build()
        assert first.languages == ("Go",)
        assert second.languages == ("Go", "Rust")

    def test_trait_kinds(self):
        """Test that each builder reports the trait lists it tracks."""
        assert ArchitectBuilder().trait_kinds == (TraitKind.LANGUAGE, TraitKind.PATTERN)
        assert DeveloperBuilder().trait_kinds == (TraitKind.LANGUAGE,)
        assert PersonBuilder().trait_kinds == ()

    def test_architect_lists_are_separate(self):
        """Test that patterns and languages accumulate independently."""
        lacy = (
            ArchitectBuilder()
            .add_design_pattern(lambda: "Builder Pattern")
            .add_language(lambda: "Kotlin")
            .add_design_pattern(lambda: "Visitor")
            .build()
        )
        assert lacy.patterns == ("Builder Pattern", "Visitor")
        assert lacy.languages == ("Kotlin",)


class TestPreset:
    """Tests for the preset language."""

    def test_kotlin_preset(self):
        """Test that the Kotlin builder starts with Kotlin."""
        assert KotlinDeveloperBuilder().build().languages == ("Kotlin",)

    def test_preset_comes_first(self):
        """Test that the preset precedes caller additions."""
        dev = KotlinDeveloperBuilder().add_language(lambda: "Go").build()
        assert dev.languages == ("Kotlin", "Go")

    def test_preset_argument(self):
        """Test that any builder tracking languages accepts a preset."""
        lacy = ArchitectBuilder(preset="Scala").build()
        assert lacy.languages == ("Scala",)

    def test_preset_on_person_rejected(self):
        """Test that a preset on a builder without languages fails."""
        with pytest.raises(ValueError):
            PersonBuilder(preset="Kotlin")


class TestBlockBuilders:
    """Tests for build_developer and build_architect."""

    def test_build_architect(self):
        """Test configuring an architect in one call."""
        lacy = build_architect(
            lambda b: b.add_design_pattern(lambda: "Builder Pattern").add_language(
                lambda: "Kotlin"
            )
        )
        assert lacy.patterns == ("Builder Pattern",)
        assert lacy.languages == ("Kotlin",)

    def test_build_developer_without_block(self):
        """Test that the block is optional."""
        purl = build_developer(name="Purl")
        assert isinstance(purl, Developer)
        assert purl.languages == ()

    def test_build_developer_with_preset_builder(self):
        """Test choosing the preset builder class."""
        dev = build_developer(
            lambda b: b.add_language(lambda: "Rust"),
            builder_class=KotlinDeveloperBuilder,
        )
        assert dev.languages == ("Kotlin", "Rust")

    def test_block_failure_propagates(self):
        """Test that errors raised in the block reach the caller."""

        def configure(builder):
            raise KeyError("boom")

        with pytest.raises(KeyError):
            build_architect(configure)


class TestBuilderRegistry:
    """Tests for BuilderRegistry."""

    def test_lookup_by_name_and_alias(self):
        """Test resolving builders by name and alias."""
        assert BuilderRegistry.get_builder("developer") is DeveloperBuilder
        assert BuilderRegistry.get_builder("arch") is ArchitectBuilder
        assert BuilderRegistry.get_builder("Kotlin") is KotlinDeveloperBuilder

    def test_unknown_builder(self):
        """Test that unknown names raise KeyError."""
        with pytest.raises(KeyError):
            BuilderRegistry.get_builder("manager")

    def test_list_builders(self):
        """Test listing registered builder names."""
        assert BuilderRegistry.list_builders() == [
            "architect",
            "developer",
            "kotlin-developer",
            "person",
        ]

    def test_list_kinds(self):
        """Test listing the record kinds the registered builders produce."""
        assert BuilderRegistry.list_kinds() == [
            PersonKind.PERSON,
            PersonKind.DEVELOPER,
            PersonKind.ARCHITECT,
        ]
