"""Calls into the Azure AI Vision image analysis service."""
from __future__ import annotations

import time
from pathlib import Path

from azure.core.exceptions import HttpResponseError

from image_insight.logging import get_logger
from image_insight.schemas import (
    AnalysisError,
    AnalysisRequest,
    AnalysisResult,
    result_from_sdk,
)
from image_insight.utils.clients import VisionClient

logger = get_logger(__name__)


def error_from_response(err: HttpResponseError) -> AnalysisError:
    """Build the reason/code/message triple from a rejected request."""
    odata = getattr(err, "error", None)
    code = getattr(odata, "code", None) or (str(err.status_code) if err.status_code else "Unknown")
    message = getattr(odata, "message", None) or err.message or str(err)
    return AnalysisError(reason=err.reason or "Error", code=str(code), message=str(message))


def analyze(request: AnalysisRequest, client: VisionClient) -> AnalysisResult:
    """Submit one image for analysis and return the converted result.

    A request the service answers with an error status yields a failed
    result. Transport problems and unreadable input files raise.
    """
    data = request.image_bytes()
    logger.debug(
        f"analyzing {request.image_path} ({len(data)} bytes) features={[str(f) for f in request.features]}"
    )
    start = time.time()
    try:
        raw = client.client.analyze(
            image_data=data,
            visual_features=request.features,
            gender_neutral_caption=request.gender_neutral_caption,
        )
    except HttpResponseError as e:
        logger.debug(f"analysis rejected after {time.time() - start:.2f}s: {e.status_code}")
        return AnalysisResult.failed(error_from_response(e))
    logger.debug(f"analysis finished in {time.time() - start:.2f}s")
    return result_from_sdk(raw)


def background_foreground(image_path: str | Path, client: VisionClient) -> None:
    """Remove the background or generate a foreground matte from the image.

    Extension point; currently does nothing.
    """
    logger.debug(f"background/foreground extraction not implemented: {image_path}")
