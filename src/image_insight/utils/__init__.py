from .images import load_font, open_rgb_copy

__all__ = [
    "load_font",
    "open_rgb_copy",
]
