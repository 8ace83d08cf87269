"""image_insight package

Send an image to Azure AI Vision, print its caption, dense captions, tags,
objects, people and read text, and save annotated copies for objects and
people.

Most users interact through the CLI (`image-insight [IMAGE]`).
"""
from .schemas import (  # re-export core models
    AnalysisError,
    AnalysisRequest,
    AnalysisResult,
    BoundingBox,
    DetectedObject,
    DetectedPerson,
)

__all__ = [
    "AnalysisError",
    "AnalysisRequest",
    "AnalysisResult",
    "BoundingBox",
    "DetectedObject",
    "DetectedPerson",
]
