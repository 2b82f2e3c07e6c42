"""
Unit tests for the slide builder webhook client; requests.post is mocked.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from app.schemas import SlideDraft, SlidesPayload
from app.slides_client import SlidesServiceError, build_slides

URL = "https://builder.example.com/exec"


def _payload():
    return SlidesPayload(
        title="Deck",
        template_id="tpl",
        slides=[
            SlideDraft(title="Intro", bullets=["A"], notes="say hi"),
            SlideDraft(title="Next", bullets=[]),
        ],
    )


def _response(status_code, data=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = data
    return resp


def test_posts_payload_and_returns_json():
    with patch("app.slides_client.requests.post", return_value=_response(200, {"id": "x", "url": "u"})) as mock_post:
        result = build_slides(_payload(), URL, "s3cret", timeout=5)

    assert result == {"id": "x", "url": "u"}
    args, kwargs = mock_post.call_args
    assert args[0] == URL
    assert kwargs["params"] == {"secret": "s3cret"}
    assert kwargs["timeout"] == 5
    assert kwargs["json"] == {
        "title": "Deck",
        "templateId": "tpl",
        "slides": [
            {"title": "Intro", "bullets": ["A"], "notes": "say hi"},
            {"title": "Next", "bullets": []},
        ],
    }


def test_error_field_is_relayed():
    with patch("app.slides_client.requests.post", return_value=_response(400, {"error": "Bad template"})):
        with pytest.raises(SlidesServiceError, match="Bad template"):
            build_slides(_payload(), URL, "s3cret")


def test_error_without_message():
    with patch("app.slides_client.requests.post", return_value=_response(502, {})):
        with pytest.raises(SlidesServiceError, match="Slides build failed"):
            build_slides(_payload(), URL, "s3cret")


def test_invalid_json():
    with patch("app.slides_client.requests.post", return_value=_response(200, json_error=ValueError("nope"))):
        with pytest.raises(SlidesServiceError, match="invalid JSON"):
            build_slides(_payload(), URL, "s3cret")


def test_transport_error_hides_secret():
    err = requests.ConnectionError(f"cannot reach {URL}?secret=s3cret")
    with patch("app.slides_client.requests.post", side_effect=err):
        with pytest.raises(SlidesServiceError) as exc_info:
            build_slides(_payload(), URL, "s3cret")
    assert "s3cret" not in str(exc_info.value)
