from __future__ import annotations

import os
from pathlib import Path
from types import TracebackType

from PIL import Image, ImageDraw

from .logging import get_logger
from .schemas import BoundingBox
from .utils.images import load_font, open_rgb_copy

logger = get_logger(__name__)

BOX_COLOR = "cyan"
BOX_WIDTH = 3
LABEL_COLOR = "whitesmoke"


class AnnotatedImageWriter:
	"""Draw boxes and labels on a fresh copy of a source image, then save it.

	Use as a context manager; the annotated copy is written on a clean exit
	and discarded when the block raises.
	"""

	def __init__(self, source: str | Path, out_path: str | Path) -> None:
		self.source = Path(source)
		self.out_path = Path(out_path)
		self._image: Image.Image | None = None
		self._draw: ImageDraw.ImageDraw | None = None
		self._font = None
		self.count = 0

	def __enter__(self) -> "AnnotatedImageWriter":
		self._image = open_rgb_copy(self.source)
		self._draw = ImageDraw.Draw(self._image)
		self._font = load_font()
		return self

	def __exit__(
		self,
		exc_type: type[BaseException] | None,
		exc: BaseException | None,
		tb: TracebackType | None,
	) -> None:
		try:
			if exc_type is None:
				self.save()
		finally:
			if self._image is not None:
				self._image.close()
			self._image = None
			self._draw = None

	def box(self, box: BoundingBox, label: str | None = None) -> None:
		if self._draw is None:
			raise RuntimeError("writer is not open")
		self._draw.rectangle(box.corners(), outline=BOX_COLOR, width=BOX_WIDTH)
		if label:
			self._draw.text((box.x, box.y), label, fill=LABEL_COLOR, font=self._font)
		self.count += 1

	def save(self) -> Path:
		if self._image is None:
			raise RuntimeError("writer is not open")
		os.makedirs(self.out_path.parent, exist_ok=True)
		self._image.save(self.out_path)
		logger.debug(f"wrote {self.count} annotations to {self.out_path}")
		return self.out_path
