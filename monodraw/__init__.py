"""Monochrome tile-buffer graphics: clipped lines, polygons, bitmap fonts, text logs and menu dialogs."""

__version__ = "0.1.0"

__all__ = [
    "canvas",
    "font",
    "framebuffer",
    "intersection",
    "kerning",
    "polygon",
    "text",
    "textlog",
    "ui",
]