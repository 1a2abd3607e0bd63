import datetime
import io
import json
import zipfile

from bs4 import BeautifulSoup

from content import PORTFOLIO
from scroll_progress import HEADER_SPRING
from settings import Settings
from utils import (
    build_site_html,
    export_site_zip,
    generate_resume_pdf,
    load_resume,
    missing_anchors,
    scroll_into_view_script,
    scroll_script,
)


def _soup(settings=None):
    return BeautifulSoup(build_site_html(PORTFOLIO, settings), "html.parser")


def test_every_nav_target_exists():
    html = build_site_html(PORTFOLIO)
    assert missing_anchors(html, PORTFOLIO.section_ids) == []


def test_nav_buttons_follow_registry_order():
    soup = _soup()
    targets = [b["data-target"] for b in soup.select("header nav button")]
    assert targets == [n.id for n in PORTFOLIO.nav]


def test_counters_carry_their_targets():
    soup = _soup()
    assert [int(el["data-count"]) for el in soup.select("[data-count]")] == [4, 12, 18, 2]


def test_contact_form_fields_are_required():
    form = _soup().find("form", id="contact-form")
    for name in ("name", "email", "message"):
        assert form.find(attrs={"name": name}).has_attr("required")


def test_script_uses_configured_backend():
    html = build_site_html(PORTFOLIO, Settings(backend_url="https://api.example.com/"))
    assert '"contactUrl": "https://api.example.com/api/contact"' in html


def test_projects_and_certifications_rendered():
    text = _soup().get_text()
    for proj in PORTFOLIO.projects:
        assert proj.title in text
    assert "If applicable" in text


def test_scroll_script_embeds_spring_constants():
    script = scroll_script(HEADER_SPRING, 0.15)
    cfg = json.loads(script.split("const cfg = ", 1)[1].split(";", 1)[0])
    assert (cfg["k"], cfg["c"], cfg["m"]) == (120, 20, 0.2)
    assert cfg["threshold"] == 0.15
    assert cfg["parent"] is False


def test_scroll_into_view_script_quotes_id():
    assert 'getElementById("about")' in scroll_into_view_script("about")


def test_resume_pdf_is_generated():
    pdf = generate_resume_pdf(PORTFOLIO)
    assert pdf.startswith(b"%PDF")


def test_static_resume_preferred_when_present(tmp_path):
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"%PDF-static")
    assert load_resume(PORTFOLIO, path) == b"%PDF-static"
    assert load_resume(PORTFOLIO, tmp_path / "nope.pdf").startswith(b"%PDF")


def test_zip_contains_site_readme_and_resume():
    data = export_site_zip(PORTFOLIO, Settings(), resume=b"%PDF-x")
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        names = set(zf.namelist())
        assert names == {"index.html", "README.md", PORTFOLIO.resume_file}
        assert zf.read(PORTFOLIO.resume_file) == b"%PDF-x"
        assert PORTFOLIO.profile.name in zf.read("index.html").decode()


def test_export_is_stamped_with_the_given_day():
    data = export_site_zip(PORTFOLIO, Settings(), resume=b"%PDF-x", today=datetime.date(2031, 5, 2))
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert "Exported on 2031-05-02." in zf.read("README.md").decode()
        footer = BeautifulSoup(zf.read("index.html"), "html.parser").find("footer")
        assert footer.get_text().startswith("© 2031 ")
