[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ogmkit"
version = "0.1.0"
description = "Helpers for OGG media tooling: header fields, MP3 frame headers, chapter files, merge options and DVD chapter listings"
requires-python = ">=3.10"
dependencies = []
keywords = ["ogg", "ogm", "mp3", "chapters", "vorbis", "dvd", "multimedia"]
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
    "Topic :: Multimedia :: Video :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ogmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
