from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageFont

from image_insight.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "load_font",
    "open_rgb_copy",
]

LABEL_FONT = "arial.ttf"
LABEL_FONT_SIZE = 16


def load_font(
    name: str = LABEL_FONT, size: int = LABEL_FONT_SIZE
) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a TrueType font, falling back to Pillow's bundled default."""
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        logger.debug(f"font {name} not available, using Pillow default")
        return ImageFont.load_default(size=size)


def open_rgb_copy(path: str | Path) -> Image.Image:
    """Open an image and return an RGB copy detached from the file handle."""
    with Image.open(path) as im:
        return im.convert("RGB")
