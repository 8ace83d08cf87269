from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional

from image_insight.config import DEFAULT_SETTINGS_FILE, load_settings
from image_insight.logging import get_logger, set_level
from image_insight.pipeline import analyze_image
from image_insight.utils.clients import VisionClient
from image_insight.vision import background_foreground

logger = get_logger(__name__)

DEFAULT_IMAGE = "images/street.jpg"


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="image-insight",
        description="Caption, tag and detect objects/people in an image with Azure AI Vision.",
    )
    p.add_argument(
        "image",
        nargs="?",
        default=DEFAULT_IMAGE,
        help=f"Image file to analyze (default: {DEFAULT_IMAGE})",
    )
    p.add_argument(
        "--settings",
        default=DEFAULT_SETTINGS_FILE,
        help="JSON file holding AIServicesEndpoint and AIServicesKey",
    )
    p.add_argument(
        "--out-dir",
        default=".",
        help="Folder for objects.jpg / persons.jpg",
    )
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(list(argv) if argv is not None else None)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)
    try:
        settings = load_settings(args.settings)
        client = VisionClient.from_settings(settings)

        analyze_image(args.image, client, out_dir=args.out_dir)

        background_foreground(args.image, client)
    except Exception as e:
        print(e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
