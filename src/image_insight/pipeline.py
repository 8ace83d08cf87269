"""Single-image workflow: request, analyze, render."""
from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .render import render_result
from .schemas import DEFAULT_FEATURES, AnalysisRequest, AnalysisResult
from .utils.clients import VisionClient
from .vision import analyze

logger = get_logger(__name__)


def analyze_image(
    image_path: str | Path, client: VisionClient, out_dir: str | Path = "."
) -> AnalysisResult:
    print(f"\nAnalyzing {image_path} \n")
    request = AnalysisRequest(image_path=Path(image_path), features=list(DEFAULT_FEATURES))
    result = analyze(request, client)
    written = render_result(result, request.image_path, out_dir=out_dir)
    if result.analyzed:
        logger.info(
            "📊 %sx%s image, model %s: %d objects, %d people, %d tags; %d annotated images",
            result.width or "?",
            result.height or "?",
            result.model_version or "unknown",
            len(result.objects),
            len(result.people),
            len(result.tags),
            len(written),
        )
    else:
        logger.warning("analysis of %s failed", image_path)
    return result
