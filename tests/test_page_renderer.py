from app.client.api_client import CareersApiClient
from app.client.page_renderer import (
    NO_JOBS_MESSAGE,
    NO_SECTIONS_MESSAGE,
    CareersPage,
    ErrorPage,
    build_careers_page,
    load_careers_page,
    render_html,
    resolve_theme,
    sort_sections,
)


def test_theme_defaults_fill_missing_colors():
    theme = resolve_theme({"logoUrl": "https://cdn.example.com/logo.png"})
    assert theme.primaryColor == "#0f172a"
    assert theme.accentColor == "#f97316"
    assert theme.logoUrl == "https://cdn.example.com/logo.png"
    assert resolve_theme(None).primaryColor == "#0f172a"


def test_sections_sorted_by_order_with_missing_as_zero():
    sections = sort_sections([
        {"id": "b", "type": "values", "title": "", "content": "x", "order": 2},
        {"id": "c", "type": "faq", "title": "Questions", "content": "y"},
        {"id": "a", "type": "about", "title": "About", "content": "z", "order": 1},
    ])
    assert [section.id for section in sections] == ["c", "a", "b"]
    assert sections[2].heading == "values"


def test_empty_states():
    page = build_careers_page({"name": "Acme", "slug": "acme", "sections": []}, [])
    assert page.sections_empty_message == NO_SECTIONS_MESSAGE
    assert page.jobs_empty_message == NO_JOBS_MESSAGE

    html = render_html(page)
    assert NO_SECTIONS_MESSAGE in html
    assert NO_JOBS_MESSAGE in html


def test_jobs_keep_server_order():
    jobs = [
        {"id": "j-2", "title": "Older listed first", "posted_at": "2024-01-01T00:00:00+00:00"},
        {"id": "j-1", "title": "Newer listed second", "posted_at": "2024-06-01T00:00:00+00:00"},
    ]
    page = build_careers_page({"name": "Acme", "slug": "acme"}, jobs)
    assert [job.id for job in page.jobs] == ["j-2", "j-1"]
    assert page.jobs_empty_message is None


def test_integer_id_and_missing_title_still_render():
    page = build_careers_page(
        {"name": "Acme", "slug": "acme"},
        [{"id": 42, "title": "Eng"}, {"id": 43, "title": None, "location": "Berlin"}],
    )
    assert [job.id for job in page.jobs] == ["42", "43"]
    assert page.jobs[1].title is None

    html = render_html(page)
    assert "<h3>Eng</h3>" in html
    assert "<h3></h3><p>Berlin" in html


def test_render_escapes_and_lists_perks():
    page = build_careers_page(
        {
            "name": "<Acme>",
            "slug": "acme",
            "sections": [{"id": "p", "type": "perks", "title": "", "content": ["Gym", "Food"], "order": 1}],
            "culture_video_url": "https://videos.example.com/acme",
        },
        [],
    )
    html = render_html(page)
    assert "&lt;Acme&gt;" in html
    assert "<li>Gym</li><li>Food</li>" in html
    assert "Culture Video" in html


def test_load_published_page(client):
    api = CareersApiClient("http://testserver", http_client=client)
    page = load_careers_page(api, "globex")
    assert isinstance(page, CareersPage)
    assert page.name == "Globex"
    assert [section.id for section in page.sections] == ["about-1", "perks-1"]
    assert page.jobs[0].id == "j-2"


def test_load_draft_page_is_error(client):
    api = CareersApiClient("http://testserver", http_client=client)
    page = load_careers_page(api, "acme")
    assert isinstance(page, ErrorPage)
    assert page.status == 404
    assert page.title == "Company not found"
    assert "Company not found" in render_html(page)
