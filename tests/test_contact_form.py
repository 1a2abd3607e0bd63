import json
from unittest.mock import MagicMock

import pytest
import requests

from contact_form import (
    ERROR_MESSAGE,
    SUCCESS_MESSAGE,
    ContactFormController,
    SubmissionResult,
)

FIELDS = {"name": "Ada", "email": "ada@example.com", "message": "Hello there"}


def _session(status=200, exc=None):
    session = MagicMock(spec=requests.Session)
    if exc is not None:
        session.post.side_effect = exc
    else:
        session.post.return_value = MagicMock(status_code=status)
    return session


def test_posts_json_once_to_contact_endpoint():
    session = _session(200)
    c = ContactFormController("https://api.example.com/", session=session)
    c.submit(FIELDS)

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == "https://api.example.com/api/contact"
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert json.loads(kwargs["data"]) == FIELDS


def test_same_origin_url_when_backend_unset():
    assert ContactFormController(session=_session()).url == "/api/contact"


@pytest.mark.parametrize("status", [200, 201, 204])
def test_success_clears_fields_and_confirms(status):
    c = ContactFormController(session=_session(status))
    assert c.submit(FIELDS) is SubmissionResult.SUCCESS
    assert c.sent
    assert c.message == SUCCESS_MESSAGE
    assert c.fields == {"name": "", "email": "", "message": ""}
    assert c.submitting is False
    assert c.error == ""


@pytest.mark.parametrize("status", [302, 400, 404, 500, 503])
def test_non_2xx_is_an_error(status):
    session = _session(status)
    c = ContactFormController(session=session)
    assert c.submit(FIELDS) is SubmissionResult.ERROR
    assert c.error == ERROR_MESSAGE
    assert c.submitting is False
    assert c.fields == FIELDS
    assert session.post.call_count == 1


def test_transport_failure_is_an_error():
    c = ContactFormController(session=_session(exc=requests.ConnectionError("down")))
    assert c.submit(FIELDS) is SubmissionResult.ERROR
    assert c.message == ERROR_MESSAGE
    assert c.submitting is False


def test_relative_url_without_http_server_is_an_error():
    session = requests.Session()
    c = ContactFormController("", session=session)
    assert c.submit(FIELDS) is SubmissionResult.ERROR


def test_next_attempt_clears_previous_error():
    session = _session(500)
    c = ContactFormController(session=session)
    c.submit(FIELDS)
    assert c.error

    session.post.return_value = MagicMock(status_code=200)
    c.submit(FIELDS)
    assert c.error == ""
    assert c.result is SubmissionResult.SUCCESS


def test_pending_while_request_in_flight():
    observed = {}
    c = None

    def post(*_args, **_kwargs):
        observed["result"] = c.result
        observed["submitting"] = c.submitting
        return MagicMock(status_code=200)

    session = MagicMock(spec=requests.Session)
    session.post.side_effect = post
    c = ContactFormController(session=session)
    c.submit(FIELDS)
    assert observed == {"result": SubmissionResult.PENDING, "submitting": True}


def test_missing_fields_rejected_before_any_request():
    session = _session()
    c = ContactFormController(session=session)
    assert c.missing_fields({"name": "", "email": "a@b.c"}) == ["name", "message"]
    with pytest.raises(ValueError):
        c.submit({"name": "Ada", "email": "", "message": "hi"})
    session.post.assert_not_called()
    assert c.result is SubmissionResult.IDLE


def test_timeout_is_passed_through():
    session = _session()
    ContactFormController(session=session, timeout=5).submit(FIELDS)
    assert session.post.call_args.kwargs["timeout"] == 5


def test_whitespace_only_field_is_still_sent():
    session = _session(200)
    c = ContactFormController(session=session)
    fields = {"name": "Ada", "email": "ada@example.com", "message": "   "}
    assert c.missing_fields(fields) == []
    assert c.submit(fields) is SubmissionResult.SUCCESS
    session.post.assert_called_once()
    assert json.loads(session.post.call_args.kwargs["data"])["message"] == "   "
