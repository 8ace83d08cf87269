"""Console rendering of an :class:`AnalysisResult` plus annotated image output."""
from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .schemas import AnalysisError, AnalysisResult
from .writer import AnnotatedImageWriter

logger = get_logger(__name__)

OBJECTS_FILE = "objects.jpg"
PERSONS_FILE = "persons.jpg"


def render_result(
    result: AnalysisResult, image_path: str | Path, out_dir: str | Path = "."
) -> list[Path]:
    """Print every present field of ``result`` and write annotated copies.

    Returns the paths of the images written (possibly none).
    """
    if not result.analyzed:
        render_error(result.error)
        return []

    written: list[Path] = []
    out_dir = Path(out_dir)

    if result.caption is not None:
        print(" Caption:")
        print(f'    "{result.caption.text}", Confidence {result.caption.confidence:.4f}')

    if result.dense_captions:
        print(" Dense Captions:")
        for caption in result.dense_captions:
            print(f'    "{caption.text}", Confidence: {caption.confidence:.4f}')
        print("\n")

    if result.tags:
        print("    Tags:")
        for tag in result.tags:
            print(f'    "{tag.name}", Confidence {tag.confidence:.4f}')
        print("\n")

    if result.objects:
        print(" Objects:")
        with AnnotatedImageWriter(image_path, out_dir / OBJECTS_FILE) as writer:
            for obj in result.objects:
                print(f'    "{obj.label}", Confidence {obj.confidence:.4f}')
                writer.box(obj.bounding_box, obj.label)
        written.append(writer.out_path)
        print(f" Results saved in {writer.out_path}\n")

    if result.people:
        print("    People:")
        with AnnotatedImageWriter(image_path, out_dir / PERSONS_FILE) as writer:
            for person in result.people:
                writer.box(person.bounding_box)
                print(f"    Bounding box {person.bounding_box}, Confidence {person.confidence: .4f}")
        written.append(writer.out_path)
        print(f" Results saved in {writer.out_path}\n")

    if result.text_lines:
        print(" Text:")
        for line in result.text_lines:
            print(f"    {line}")
        print()

    return written


def render_error(error: AnalysisError | None) -> None:
    if error is None:
        # failed result without details
        error = AnalysisError(reason="Unknown", code="Unknown", message="no error details returned")
    print(" Analysis Failed")
    print(f"    Error reason: {error.reason}")
    print(f"    Error code: {error.code}")
    print(f"    Error message: {error.message}\n")
