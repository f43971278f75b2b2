[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monodraw"
version = "0.1.0"
description = "Monochrome graphics: tile buffers, clipped lines, polygons, compressed bitmap fonts, text logs and menu dialogs"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "monochrome", "framebuffer", "bitmap-font", "tile-buffer", "dialog"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monodraw"]

[tool.pytest.ini_options]
addopts = "-ra"
