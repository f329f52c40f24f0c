"""Tests for SchemaValidator."""

import pytest

from pageforge.content.defaults import DEFAULT_CONTENT
from pageforge.errors import SchemaViolationError
from pageforge.schema import FieldType, SchemaValidator, get_schema


@pytest.fixture
def about() -> SchemaValidator:
    return SchemaValidator(get_schema("about"))


@pytest.fixture
def services() -> SchemaValidator:
    return SchemaValidator(get_schema("services"))


class TestCheckFields:
    def test_accepts_known_fields(self, about: SchemaValidator):
        about.check_fields("hero", {"title": "Hello", "ctaLink": "/go"})

    def test_unknown_section(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError) as exc_info:
            about.check_fields("footer", {"title": "x"})
        assert exc_info.value.path == "footer"
        assert exc_info.value.page == "about"

    def test_unknown_field(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="unknown field"):
            about.check_fields("hero", {"subtitle": "x"})

    def test_wrong_type(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="expected text"):
            about.check_fields("hero", {"title": 42})

    def test_root_fields(self, about: SchemaValidator):
        about.check_fields("_root", {"valuesTitle": "What we believe"})

    def test_number_rejects_bool(self, services: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="expected a number"):
            services.check_item(["_root", "packages"], {"price": True})


class TestCheckGroup:
    def test_group_merge(self, about: SchemaValidator):
        about.check_group("founder", "socials", {"github": "https://github.com/x"})

    def test_not_a_group(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="expected a group"):
            about.check_group("founder", "name", {"x": "y"})

    def test_unknown_network(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError):
            about.check_group("founder", "socials", {"myspace": "x"})


class TestCollections:
    def test_collection_field(self, about: SchemaValidator):
        field = about.collection_field(["team", "members"])
        assert field.type == FieldType.ARRAY

    def test_nested_collection(self, services: SchemaValidator):
        field = services.collection_field(["_root", "overview", "web", "features"])
        assert field.name == "features"

    def test_not_a_collection(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="not a collection"):
            about.collection_field(["hero", "title"])

    def test_collection_needs_field(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError):
            about.collection_field(["team"])

    def test_item_with_id(self, about: SchemaValidator):
        about.check_item(["team", "members"], {"id": "m1", "name": "Ada", "role": "CTO"})

    def test_item_bad_id(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="item ids"):
            about.check_item(["team", "members"], {"id": ["x"]})

    def test_item_unknown_field(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError):
            about.check_item(["team", "members"], {"salary": "lots"})

    def test_nested_group_in_item(self, about: SchemaValidator):
        about.check_item(["team", "members"], {"socials": {"twitter": "@ada"}})


class TestCheckPath:
    def test_scalar_path(self, about: SchemaValidator):
        about.check_path(["hero", "title"], "New")

    def test_group_member_path(self, about: SchemaValidator):
        about.check_path(["founder", "socials", "github"], "gh")

    def test_item_field_path(self, about: SchemaValidator):
        about.check_path(["team", "members", "rasel", "name"], "R. Hossain")

    def test_whole_item_path(self, about: SchemaValidator):
        about.check_path(["team", "members", "rasel"], {"name": "R", "role": "CEO"})

    def test_whole_item_must_be_mapping(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError):
            about.check_path(["team", "members", "rasel"], "R")

    def test_whole_section(self, about: SchemaValidator):
        about.check_path(["cta"], {"title": "Join"})

    def test_whole_section_must_be_mapping(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError):
            about.check_path(["cta"], "Join")

    def test_scalar_has_no_children(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="no nested fields"):
            about.check_path(["hero", "title", "x"], "y")

    def test_empty_path(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="empty path"):
            about.check_path([], "x")

    def test_tags(self, about: SchemaValidator):
        about.check_path(["seo", "keywords"], ["a", "b"])
        with pytest.raises(SchemaViolationError):
            about.check_path(["seo", "keywords"], "a, b")


class TestCheckDocument:
    @pytest.mark.parametrize("page", list(DEFAULT_CONTENT))
    def test_defaults_match_schema(self, page: str):
        SchemaValidator(get_schema(page)).check_document(DEFAULT_CONTENT[page])

    def test_unknown_top_level_key(self, about: SchemaValidator):
        with pytest.raises(SchemaViolationError, match="unknown section"):
            about.check_document({"sidebar": {}})
