import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests
import streamlit as st
from streamlit.testing.v1 import AppTest

from contact_form import SUCCESS_MESSAGE

APP = str(Path(__file__).resolve().parents[1] / "streamlit_app.py")


@pytest.fixture
def posts(monkeypatch):
    sent = []

    def post(self, url, **kwargs):
        sent.append((url, kwargs))
        return MagicMock(status_code=200)

    monkeypatch.setattr(requests.Session, "post", post)
    return sent


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("PORTFOLIO_BACKEND_URL", "https://api.example.com")
    monkeypatch.setenv("PORTFOLIO_THEME_STORE", str(tmp_path / "preferences.json"))
    monkeypatch.setenv("PORTFOLIO_RESUME_PATH", str(tmp_path / "none.pdf"))
    st.cache_resource.clear()
    st.cache_data.clear()
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    yield at
    st.cache_resource.clear()
    st.cache_data.clear()


def _send_button(at):
    return next(b for b in at.button if b.label == "Send Message")


def test_successful_send_clears_the_form(app, posts):
    app.text_input(key="contact_name").input("Ada")
    app.text_input(key="contact_email").input("ada@example.com")
    app.text_area(key="contact_message").input("Hello there")
    _send_button(app).click().run()

    assert not app.exception
    assert len(posts) == 1
    url, kwargs = posts[0]
    assert url == "https://api.example.com/api/contact"
    assert json.loads(kwargs["data"]) == {
        "name": "Ada", "email": "ada@example.com", "message": "Hello there"}
    assert app.text_input(key="contact_name").value == ""
    assert app.text_input(key="contact_email").value == ""
    assert app.text_area(key="contact_message").value == ""
    assert app.success[0].value == SUCCESS_MESSAGE


def test_empty_form_warns_without_posting(app, posts):
    _send_button(app).click().run()
    assert posts == []
    assert "Please fill in: name, email, message" in app.warning[0].value


def test_theme_toggle_updates_session_and_store(app, tmp_path):
    start = app.session_state["theme"]
    app.button(key="theme_toggle").click().run()
    flipped = "dark" if start == "light" else "light"
    assert app.session_state["theme"] == flipped
    assert json.loads((tmp_path / "preferences.json").read_text()) == {"theme": flipped}


def test_nav_button_request_is_consumed(app):
    app.button(key="nav_about").click().run()
    assert not app.exception
    assert "scroll_target" not in app.session_state
