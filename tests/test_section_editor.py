import pytest

from app.client.api_client import CareersApiClient
from app.client.errors import ApiError
from app.client.section_editor import SectionEditor, normalize_sections, perks_from_text
from app.client.session import RequestContext
from app.models.company import Section, SectionType


@pytest.fixture()
def editor(client):
    api = CareersApiClient("http://testserver", http_client=client)
    editor = SectionEditor(api, RequestContext(access_token="token-acme"), "acme")
    editor.load()
    return editor


def test_load_populates_draft(editor):
    assert editor.company["slug"] == "acme"
    assert [section.id for section in editor.sections] == ["about-1", "perks-1"]
    assert editor.theme.primaryColor == "#111827"
    # Absent theme fields keep the editor defaults
    assert editor.theme.font == "inter"
    assert editor.culture_video_url == ""


def test_load_without_slug(client):
    api = CareersApiClient("http://testserver", http_client=client)
    with pytest.raises(ApiError) as exc_info:
        SectionEditor(api, RequestContext(access_token="token-acme"), "").load()
    assert exc_info.value.status == 400


def test_load_for_foreign_company_is_denied(client):
    api = CareersApiClient("http://testserver", http_client=client)
    with pytest.raises(ApiError) as exc_info:
        SectionEditor(api, RequestContext(access_token="token-acme"), "globex").load()
    assert exc_info.value.status == 403
    assert exc_info.value.title == "Access denied"


def test_add_section_defaults(editor):
    perks = editor.add_section(SectionType.PERKS)
    faq = editor.add_section("faq")
    assert perks.content == []
    assert faq.content == ""
    assert perks.title == ""
    assert perks.order == 3
    assert faq.order == 4
    assert perks.id != faq.id


def test_delete_does_not_renumber(editor):
    editor.delete_section(0)
    assert [section.order for section in editor.sections] == [2]


def test_reorder_moves_without_renumbering(editor):
    editor.add_section("faq")
    editor.reorder(2, 0)
    assert [section.type for section in editor.sections] == ["faq", "about", "perks"]
    assert [section.order for section in editor.sections] == [3, 1, 2]


def test_reorder_noops(editor):
    before = list(editor.sections)
    editor.reorder(None, 1)
    editor.reorder(1, 1)
    assert editor.sections == before


def test_edit_field_merges(editor):
    editor.edit_field(0, title="Who we are")
    assert editor.sections[0].title == "Who we are"
    assert editor.sections[0].content == "We build things."


def test_perks_content_round_trips_through_text(editor):
    assert editor.content_text(1) == "Remote\nEquity"
    editor.set_content_text(1, "  Remote \n\nGym\n")
    assert editor.sections[1].content == ["Remote", "Gym"]


def test_plain_content_is_verbatim(editor):
    editor.set_content_text(0, "  Line one\nLine two ")
    assert editor.sections[0].content == "  Line one\nLine two "


def test_save_recomputes_order_and_persists(editor, fake_db):
    editor.add_section("faq")
    editor.reorder(2, 0)
    editor.delete_section(2)
    editor.set_theme(accentColor="#ff0000")
    editor.culture_video_url = "https://videos.example.com/acme"

    editor.save()

    stored = fake_db.company("acme")
    assert [section["order"] for section in stored["sections"]] == [1, 2]
    assert [section["type"] for section in stored["sections"]] == ["faq", "about"]
    assert stored["theme"]["accentColor"] == "#ff0000"
    assert stored["culture_video_url"] == "https://videos.example.com/acme"
    assert [section.order for section in editor.sections] == [1, 2]


def test_save_with_empty_video_url_stores_null(editor, fake_db):
    editor.save()
    assert fake_db.company("acme")["culture_video_url"] is None
    assert editor.culture_video_url == ""


def test_save_keeps_local_sections_when_response_lacks_them(editor):
    class BareApi:
        def update_company(self, slug, payload, context):
            return {"slug": slug}

    editor.api_client = BareApi()
    editor.reorder(1, 0)
    editor.save()
    assert [(section.type, section.order) for section in editor.sections] == [("perks", 1), ("about", 2)]


def test_save_validation_error_surfaces(editor):
    editor.culture_video_url = "not-a-url"
    with pytest.raises(ApiError) as exc_info:
        editor.save()
    assert exc_info.value.status == 400
    assert "culture_video_url" in exc_info.value.message


def test_publish_and_unpublish_refresh_company(editor, client):
    assert editor.publish()["status"] == "published"
    assert client.get("/api/public/company/acme").status_code == 200
    assert editor.unpublish()["status"] == "draft"


def test_normalize_sections_fills_gaps():
    sections = normalize_sections([{"type": "perks", "content": ["a"]}, {"order": "x"}, "junk"], [])
    assert sections[0].id == "perks-0"
    assert sections[0].order == 1
    assert sections[1].type == "about"
    assert sections[1].order == 2
    assert sections[2].content == ""


def test_normalize_sections_fallback():
    assert normalize_sections(None, ["fallback"]) == ["fallback"]


def test_perks_from_text():
    assert perks_from_text("a\n  \n b ") == ["a", "b"]


def test_section_type_default_is_plain_value():
    section = Section(id="s-1")
    assert section.type == "about"
    assert type(section.type) is str
    assert section.model_dump()["type"] == "about"
