"""Tests for the page schema registry and field descriptors."""

import pytest
from pydantic import ValidationError

from pageforge.errors import UnknownPageError
from pageforge.schema import (
    CMS_SCHEMA,
    ROOT_SECTION,
    FieldSpec,
    FieldType,
    empty_section,
    empty_value,
    get_schema,
    page_keys,
)


class TestRegistry:
    def test_page_keys_in_display_order(self):
        assert page_keys() == ["home", "about", "services", "blog", "support"]

    def test_get_schema(self):
        schema = get_schema("about")
        assert schema.key == "about"
        assert schema.label == "About Page"

    def test_unknown_page_raises(self):
        with pytest.raises(UnknownPageError) as exc_info:
            get_schema("careers")
        assert exc_info.value.page == "careers"

    @pytest.mark.parametrize("page", list(CMS_SCHEMA))
    def test_section_ids_unique(self, page: str):
        ids = get_schema(page).section_ids
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("page", list(CMS_SCHEMA))
    def test_field_names_unique_per_section(self, page: str):
        for section in get_schema(page).sections:
            names = [f.name for f in section.fields]
            assert len(names) == len(set(names)), section.id

    def test_about_sections(self):
        assert get_schema("about").section_ids == [
            "seo", "hero", "founder", "mission", ROOT_SECTION, "culture", "team", "cta",
        ]

    def test_nested_collection_descriptor(self):
        overview = get_schema("services").field(ROOT_SECTION, "overview")
        assert overview is not None
        assert overview.type == FieldType.ARRAY
        features = overview.field("features")
        assert features is not None
        assert features.type == FieldType.ARRAY
        assert [f.name for f in features.fields] == ["iconName", "title", "desc"]

    def test_unknown_field_lookup(self):
        assert get_schema("about").field("hero", "nope") is None
        assert get_schema("about").field("nope", "title") is None


class TestFieldSpec:
    def test_group_requires_subfields(self):
        with pytest.raises(ValidationError):
            FieldSpec(name="socials", label="Socials", type=FieldType.GROUP)

    def test_scalar_rejects_subfields(self):
        child = FieldSpec(name="x", label="X", type=FieldType.TEXT)
        with pytest.raises(ValidationError):
            FieldSpec(name="title", label="Title", type=FieldType.TEXT, fields=[child])

    def test_rich_text_value(self):
        assert FieldType("rich-text") == FieldType.RICH_TEXT


class TestEmptyValues:
    def test_scalars(self):
        assert empty_value(FieldSpec(name="a", label="A", type=FieldType.TEXT)) == ""
        assert empty_value(FieldSpec(name="a", label="A", type=FieldType.BOOLEAN)) is False
        assert empty_value(FieldSpec(name="a", label="A", type=FieldType.NUMBER)) == 0
        assert empty_value(FieldSpec(name="a", label="A", type=FieldType.TAGS)) == []

    def test_group_is_filled_recursively(self):
        socials = get_schema("about").field("team", "members").field("socials")
        assert empty_value(socials) == {"github": "", "linkedin": "", "twitter": ""}

    def test_empty_section(self):
        mission = get_schema("about").section("mission")
        assert empty_section(mission) == {
            "badge": "",
            "titleLine1": "",
            "titleLine2": "",
            "quote": "",
            "quoteHighlight": "",
        }

    def test_empty_section_with_collection(self):
        team = get_schema("about").section("team")
        assert empty_section(team)["members"] == []
