"""Tests for content domain models."""

from datetime import UTC, datetime

import pytest

from pageforge.content.defaults import DEFAULT_CONTENT, default_document
from pageforge.content.models import ContentDocument, ContentStatus, Revision
from pageforge.errors import UnknownPageError


class TestContentStatus:
    def test_enum_values(self):
        assert ContentStatus.DRAFT == "draft"
        assert ContentStatus.PUBLISHED == "published"

    def test_all_values(self):
        assert {s.value for s in ContentStatus} == {"draft", "published"}


class TestContentDocument:
    def test_defaults(self):
        doc = ContentDocument(page="about")
        assert doc.content == {}
        assert doc.status == ContentStatus.DRAFT
        assert doc.last_updated.tzinfo is not None

    def test_section_lookup(self):
        doc = ContentDocument(page="about", content={"hero": {"title": "Hi"}, "stats": []})
        assert doc.section("hero") == {"title": "Hi"}
        assert doc.section("missing") is None
        assert doc.section("stats") is None

    def test_root_section_is_whole_content(self):
        doc = ContentDocument(page="about", content={"stats": []})
        assert doc.section("_root") is doc.content

    def test_to_payload(self):
        ts = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)
        doc = ContentDocument(
            page="about",
            content={"hero": {"title": "Hi"}},
            status=ContentStatus.PUBLISHED,
            last_updated=ts,
        )
        assert doc.to_payload() == {
            "hero": {"title": "Hi"},
            "status": "published",
            "lastUpdated": "2025-03-01T12:00:00+00:00",
        }

    def test_from_flat_payload(self):
        doc = ContentDocument.from_payload(
            "about",
            {"hero": {"title": "Hi"}, "status": "published", "lastUpdated": "2025-03-01T12:00:00Z"},
        )
        assert doc.page == "about"
        assert doc.content == {"hero": {"title": "Hi"}}
        assert doc.status == ContentStatus.PUBLISHED
        assert doc.last_updated == datetime(2025, 3, 1, 12, 0, tzinfo=UTC)

    def test_from_envelope_payload(self):
        doc = ContentDocument.from_payload(
            "home",
            {
                "id": "abc",
                "pageKey": "home",
                "content": {"hero": {"title": "Hi"}},
                "status": "draft",
                "updatedAt": "2025-03-01T12:00:00Z",
            },
        )
        assert doc.content == {"hero": {"title": "Hi"}}
        assert doc.status == ContentStatus.DRAFT

    def test_payload_without_status_is_draft(self):
        doc = ContentDocument.from_payload("about", {"hero": {}})
        assert doc.status == ContentStatus.DRAFT

    def test_payload_round_trip(self):
        original = default_document("services")
        restored = ContentDocument.from_payload("services", original.to_payload())
        assert restored.content == original.content
        assert restored.fingerprint() == original.fingerprint()

    def test_invalid_status_rejected(self):
        with pytest.raises(ValueError):
            ContentDocument.from_payload("about", {"status": "archived"})

    def test_fingerprint_ignores_timestamp(self):
        a = ContentDocument(page="about", content={"x": 1}, last_updated=datetime(2020, 1, 1, tzinfo=UTC))
        b = ContentDocument(page="about", content={"x": 1})
        assert a.fingerprint() == b.fingerprint()

    def test_fingerprint_tracks_content_and_status(self):
        a = ContentDocument(page="about", content={"x": 1})
        assert a.fingerprint() != ContentDocument(page="about", content={"x": 2}).fingerprint()
        published = a.model_copy(update={"status": ContentStatus.PUBLISHED})
        assert a.fingerprint() != published.fingerprint()


class TestRevision:
    def test_label(self):
        doc = ContentDocument(page="about")
        revision = Revision(
            id="r3",
            page="about",
            created_at=datetime(2025, 3, 1, 9, 30, tzinfo=UTC),
            document=doc,
        )
        assert revision.label == "r3 (draft, 2025-03-01 09:30)"

    def test_json_round_trip(self):
        revision = Revision(id="r1", page="about", document=default_document("about"))
        restored = Revision.model_validate_json(revision.model_dump_json())
        assert restored.document.content == revision.document.content


class TestDefaults:
    def test_every_page_has_defaults(self):
        from pageforge.schema import page_keys

        assert set(DEFAULT_CONTENT) == set(page_keys())

    def test_default_document_is_a_fresh_copy(self):
        a = default_document("about")
        a.content["hero"]["title"] = "changed"
        assert default_document("about").content["hero"]["title"] == "We build the"

    def test_default_document_is_draft(self):
        assert default_document("blog").status == ContentStatus.DRAFT

    def test_unknown_page(self):
        with pytest.raises(UnknownPageError):
            default_document("careers")

    @pytest.mark.parametrize("page", list(DEFAULT_CONTENT))
    def test_collection_items_have_ids(self, page: str):
        def walk(node):
            if isinstance(node, list):
                for item in node:
                    if isinstance(item, dict):
                        assert "id" in item, item
                        walk(item)
            elif isinstance(node, dict):
                for value in node.values():
                    walk(value)

        walk(DEFAULT_CONTENT[page])
