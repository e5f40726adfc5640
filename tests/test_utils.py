from __future__ import annotations

import base64
import json

import pytest

import utils
from exceptions import JSONExtractionError, MalformedJSONError, NoJSONObjectError
from models import ReferenceData


PAYLOAD = {"location": "A bus stop", "details": "Rain on glass", "age": 31, "tags": ["a", "b"]}


def test_extract_json_from_fenced_block() -> None:
    text = f"Here you go:\n```json\n{json.dumps(PAYLOAD, indent=2)}\n```\nEnjoy!"
    assert utils.extract_json(text) == PAYLOAD


def test_extract_json_from_prose() -> None:
    text = f"Sure! The values are {json.dumps(PAYLOAD)} and that is all."
    assert utils.extract_json(text) == PAYLOAD


def test_extract_json_plain_object() -> None:
    assert utils.extract_json(json.dumps(PAYLOAD)) == PAYLOAD


def test_fenced_block_wins_over_surrounding_braces() -> None:
    text = 'Ignore {"not": "this"} and use\n```json\n{"mood": "Serene"}\n```'
    assert utils.extract_json(text) == {"mood": "Serene"}


def test_malformed_fence_falls_back_to_brace_span(caplog: pytest.LogCaptureFixture) -> None:
    text = 'Broken: ```json\n{oops\n``` but later {"mood": "Dreamy"}'
    # brace span runs from the first "{" to the last "}" and is invalid here
    with pytest.raises(MalformedJSONError):
        utils.extract_json(text)

    text = '```json\nnot json at all\n```\n{"mood": "Dreamy"}'
    with caplog.at_level("WARNING"):
        assert utils.extract_json(text) == {"mood": "Dreamy"}
    assert "falling back" in caplog.text


@pytest.mark.parametrize("text", ["", "no json here", "} backwards {", "only { opening", "closing } only"])
def test_no_json_object(text: str) -> None:
    with pytest.raises(NoJSONObjectError) as exc_info:
        utils.extract_json(text)
    assert "did not contain a valid JSON object" in str(exc_info.value)


def test_malformed_json_keeps_fragment_out_of_message() -> None:
    with pytest.raises(MalformedJSONError) as exc_info:
        utils.extract_json("The answer is {location: unquoted, } ok")
    err = exc_info.value
    assert str(err) == "AI returned malformed JSON."
    assert err.fragment == "{location: unquoted, }"
    assert isinstance(err, JSONExtractionError)


def test_file_to_base64_reads_whole_file(reference_file) -> None:
    data, mime_type = utils.file_to_base64(reference_file)
    assert base64.b64decode(data) == reference_file.read_bytes()
    assert mime_type == "image/png"


def test_load_reference_image_fetches_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    class Response:
        status_code = 200
        content = b"jpeg-bytes"
        headers = {"Content-Type": "image/jpeg; charset=binary"}

    requested = []

    def fake_get(url, **kwargs):  # noqa: ANN001, ANN003
        requested.append(url)
        return Response()

    monkeypatch.setattr(utils.requests, "get", fake_get)
    data, mime_type = utils.load_reference_image(ReferenceData(photo="https://cdn.example.com/ref.jpg", use_photo=True))
    assert requested == ["https://cdn.example.com/ref.jpg"]
    assert base64.b64decode(data) == b"jpeg-bytes"
    assert mime_type == "image/jpeg"


def test_fetch_image_as_base64_raises_on_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    class Response:
        status_code = 404
        content = b""
        headers = {}

    monkeypatch.setattr(utils.requests, "get", lambda url, **kwargs: Response())
    with pytest.raises(Exception, match="Failed to fetch image: 404"):
        utils.fetch_image_as_base64("https://cdn.example.com/missing.jpg")


def test_load_reference_image_prefers_inline_data(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_network(*args, **kwargs):  # noqa: ANN002, ANN003
        raise AssertionError("inline data must not be fetched")

    monkeypatch.setattr(utils.requests, "get", no_network)
    reference = ReferenceData(photo_data="aW1n", mime_type="image/webp", use_photo=True)
    assert utils.load_reference_image(reference) == ("aW1n", "image/webp")
