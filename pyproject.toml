[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notangka"
version = "0.1.0"
description = "Building blocks for numbered (cipher) music notation: MusicXML parsing, key signatures, syllables, lyrics, hyphens, verses and credits written as SVG"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "musicxml", "numbered notation", "cipher notation", "svg", "hymn", "lyrics", "syllable"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
notangka-syllables = "notangka.lyric_parser:main"

[tool.hatch.build.targets.wheel]
packages = ["notangka"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
