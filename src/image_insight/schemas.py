"""Pydantic models describing an analysis request and the service's answer."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from azure.ai.vision.imageanalysis.models import VisualFeatures
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_FEATURES: list[VisualFeatures] = [
    VisualFeatures.CAPTION,
    VisualFeatures.DENSE_CAPTIONS,
    VisualFeatures.OBJECTS,
    VisualFeatures.PEOPLE,
    VisualFeatures.READ,
    VisualFeatures.TAGS,
]


class BoundingBox(BaseModel):
    """Axis-aligned box in source-image pixels, as returned by the service."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int
    height: int

    def corners(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.x + self.width, self.y + self.height

    def __str__(self) -> str:
        return f"{{x={self.x}, y={self.y}, w={self.width}, h={self.height}}}"


class CaptionItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    confidence: float
    bounding_box: BoundingBox | None = None


class TagItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    confidence: float


class DetectedObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    confidence: float
    bounding_box: BoundingBox


class DetectedPerson(BaseModel):
    model_config = ConfigDict(frozen=True)

    confidence: float
    bounding_box: BoundingBox


class AnalysisError(BaseModel):
    """Reason / code / message triple reported when analysis is rejected."""

    model_config = ConfigDict(frozen=True)

    reason: str
    code: str
    message: str


class AnalysisRequest(BaseModel):
    image_path: Path
    features: list[VisualFeatures] = Field(default_factory=lambda: list(DEFAULT_FEATURES))
    gender_neutral_caption: bool = True

    @field_validator("features")
    @classmethod
    def _features_not_empty(cls, v: list[VisualFeatures]) -> list[VisualFeatures]:  # noqa: D401
        if not v:
            raise ValueError("at least one visual feature must be requested")
        return v

    def image_bytes(self) -> bytes:
        return self.image_path.read_bytes()


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    analyzed: bool
    caption: CaptionItem | None = None
    dense_captions: list[CaptionItem] = Field(default_factory=list)
    tags: list[TagItem] = Field(default_factory=list)
    objects: list[DetectedObject] = Field(default_factory=list)
    people: list[DetectedPerson] = Field(default_factory=list)
    text_lines: list[str] = Field(default_factory=list)
    width: int | None = None
    height: int | None = None
    model_version: str | None = None
    error: AnalysisError | None = None

    @classmethod
    def failed(cls, error: AnalysisError) -> "AnalysisResult":
        return cls(analyzed=False, error=error)


# SDK conversion helpers


def _box(raw: Any) -> BoundingBox:
    return BoundingBox(x=raw.x, y=raw.y, width=raw.width, height=raw.height)


def _items(block: Any) -> list[Any]:
    # The SDK wraps every list-valued feature in an object exposing `.list`
    if block is None:
        return []
    return list(getattr(block, "list", None) or [])


def result_from_sdk(raw: Any) -> AnalysisResult:
    """Convert an ``ImageAnalysisResult`` into an :class:`AnalysisResult`.

    Features that were not returned are left empty. Detected objects carry
    their label as the first entry of their tag list; objects without any
    tag are skipped.
    """
    caption = None
    if getattr(raw, "caption", None) is not None:
        caption = CaptionItem(text=raw.caption.text, confidence=raw.caption.confidence)

    dense = [
        CaptionItem(
            text=c.text,
            confidence=c.confidence,
            bounding_box=_box(c.bounding_box) if getattr(c, "bounding_box", None) else None,
        )
        for c in _items(getattr(raw, "dense_captions", None))
    ]
    tags = [TagItem(name=t.name, confidence=t.confidence) for t in _items(getattr(raw, "tags", None))]

    objects: list[DetectedObject] = []
    for obj in _items(getattr(raw, "objects", None)):
        obj_tags = list(getattr(obj, "tags", None) or [])
        if not obj_tags:
            logger.warning("Skipping detected object without a tag at %s", _box(obj.bounding_box))
            continue
        objects.append(
            DetectedObject(
                label=obj_tags[0].name,
                confidence=obj_tags[0].confidence,
                bounding_box=_box(obj.bounding_box),
            )
        )

    people = [
        DetectedPerson(confidence=p.confidence, bounding_box=_box(p.bounding_box))
        for p in _items(getattr(raw, "people", None))
    ]

    lines: list[str] = []
    read = getattr(raw, "read", None)
    if read is not None:
        for block in getattr(read, "blocks", None) or []:
            lines.extend(line.text for line in block.lines)

    metadata = getattr(raw, "metadata", None)
    return AnalysisResult(
        analyzed=True,
        caption=caption,
        dense_captions=dense,
        tags=tags,
        objects=objects,
        people=people,
        text_lines=lines,
        width=getattr(metadata, "width", None),
        height=getattr(metadata, "height", None),
        model_version=getattr(raw, "model_version", None),
    )
