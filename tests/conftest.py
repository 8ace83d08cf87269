"""Shared test fixtures for image-insight tests."""

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from PIL import Image


def _box(x: int, y: int, w: int, h: int) -> SimpleNamespace:
    return SimpleNamespace(x=x, y=y, width=w, height=h)


def make_sdk_result(
    caption: tuple[str, float] | None = ("a busy street", 0.81234),
    dense: list[tuple[str, float]] | None = None,
    tags: list[tuple[str, float]] | None = None,
    objects: list[tuple[str, float, tuple[int, int, int, int]]] | None = None,
    people: list[tuple[float, tuple[int, int, int, int]]] | None = None,
    lines: list[str] | None = None,
) -> SimpleNamespace:
    """Build an object shaped like the SDK's ``ImageAnalysisResult``."""
    return SimpleNamespace(
        model_version="2023-10-01",
        metadata=SimpleNamespace(width=64, height=48),
        caption=SimpleNamespace(text=caption[0], confidence=caption[1]) if caption else None,
        dense_captions=SimpleNamespace(
            list=[
                SimpleNamespace(text=t, confidence=c, bounding_box=_box(0, 0, 10, 10))
                for t, c in (dense or [])
            ]
        ),
        tags=SimpleNamespace(
            list=[SimpleNamespace(name=n, confidence=c) for n, c in (tags or [])]
        ),
        objects=SimpleNamespace(
            list=[
                SimpleNamespace(
                    bounding_box=_box(*b),
                    tags=[SimpleNamespace(name=n, confidence=c)],
                )
                for n, c, b in (objects or [])
            ]
        ),
        people=SimpleNamespace(
            list=[SimpleNamespace(confidence=c, bounding_box=_box(*b)) for c, b in (people or [])]
        ),
        read=SimpleNamespace(
            blocks=[SimpleNamespace(lines=[SimpleNamespace(text=t) for t in (lines or [])])]
        ),
    )


class FakeAnalysisClient:
    """Stands in for ``ImageAnalysisClient``; records the last call."""

    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def analyze(self, image_data: bytes, visual_features, **kwargs) -> Any:
        self.calls.append({"image_data": image_data, "visual_features": visual_features, **kwargs})
        if self.error is not None:
            raise self.error
        return self.result


class FakeVisionClient:
    """Mimics ``image_insight.utils.clients.VisionClient`` without the SDK."""

    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.endpoint = "https://example.cognitiveservices.azure.com/"
        self.key = "test-key"
        self.client = FakeAnalysisClient(result=result, error=error)


@pytest.fixture(autouse=True)
def _clear_service_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also removes values a test loads from .env
    for name in ("AI_SERVICES_ENDPOINT", "AI_SERVICES_KEY"):
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    monkeypatch.setattr("image_insight.config.load_dotenv", lambda *a, **k: False)


@pytest.fixture
def sample_image(tmp_path: Path) -> Path:
    """Write a small JPEG and return its path."""
    path = tmp_path / "street.jpg"
    Image.new("RGB", (64, 48), color=(40, 40, 40)).save(path)
    return path


@pytest.fixture
def settings_file(tmp_path: Path):
    """Write a settings file with the given content and return its path."""

    def _write(data: Any, name: str = "appsettings.json") -> Path:
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write


@pytest.fixture
def valid_settings(settings_file) -> Path:
    return settings_file(
        {
            "AIServicesEndpoint": "https://example.cognitiveservices.azure.com/",
            "AIServicesKey": "secret-key",
        }
    )


@pytest.fixture
def full_sdk_result() -> SimpleNamespace:
    """Caption, 2 dense captions, 3 tags, 2 objects, 1 person, 1 text line."""
    return make_sdk_result(
        dense=[("a man crossing", 0.7), ("a red car", 0.65432)],
        tags=[("outdoor", 0.99), ("street", 0.95), ("car", 0.9)],
        objects=[("car", 0.812, (5, 5, 20, 10)), ("bicycle", 0.6, (30, 20, 10, 10))],
        people=[(0.9012, (40, 10, 8, 20))],
        lines=["MAIN ST"],
    )
