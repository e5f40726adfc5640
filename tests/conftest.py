from __future__ import annotations

import io
import json as jsonlib

import pytest

import gemini_service
from models import ModelData, ReferenceData, SceneData


class FakeResponse:
    def __init__(self, body=None, status_code: int = 200):
        if isinstance(body, (dict, list)):
            body = jsonlib.dumps(body)
        self._raw_bytes = (body or "").encode("utf-8")
        self.status_code = status_code
        self.raw = io.BytesIO(self._raw_bytes)
        self.headers = {"Content-Type": "application/json"}

    @property
    def text(self) -> str:
        return self._raw_bytes.decode("utf-8")

    @property
    def content(self) -> bytes:
        return self._raw_bytes

    def json(self):
        return jsonlib.loads(self._raw_bytes)


class PostRecorder:
    """Stand-in for requests.post that replays queued responses and keeps request bodies."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, body=None, status_code: int = 200) -> None:
        self.responses.append(FakeResponse(body, status_code))

    def __call__(self, url, headers=None, data=None, json=None, **kwargs):  # noqa: A002
        if data is not None and hasattr(data, "read"):
            body = jsonlib.loads(data.read())
        else:
            body = json
        self.calls.append({"url": url, "headers": headers, "body": body, "kwargs": kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        return self.responses.pop(0)


@pytest.fixture
def fake_post(monkeypatch: pytest.MonkeyPatch) -> PostRecorder:
    recorder = PostRecorder()
    monkeypatch.setattr(gemini_service.requests, "post", recorder)
    return recorder


@pytest.fixture
def model_data() -> ModelData:
    return ModelData(
        age=29,
        gender="Female",
        expression="Soft smile",
        body_shape="Athletic",
        outfit="Oversized linen shirt with wide-leg trousers",
        outfit_color="Burgundy",
        description="Wavy shoulder-length hair",
        tones="Olive skin, black hair, hazel eyes",
        pose="Walking toward the camera mid-stride",
        is_sensual=False,
    )


@pytest.fixture
def scene_data() -> SceneData:
    return SceneData(
        location="A cramped apartment kitchen",
        lighting="Soft window light",
        mood="Relaxed",
        details="Dishes stacked in the sink",
        shot_type="Medium shot",
    )


@pytest.fixture
def reference_file(tmp_path):
    path = tmp_path / "reference.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image-bytes")
    return path


@pytest.fixture
def no_reference() -> ReferenceData:
    return ReferenceData()
