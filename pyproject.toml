[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mapkha"
version = "0.1.0"
description = "Dictionary-based Thai word segmentation using maximal matching"
requires-python = ">=3.10"
dependencies = []
keywords = ["thai", "word segmentation", "tokenizer", "nlp", "wordcut", "maximal matching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: Thai",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mapkha = "mapkha.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mapkha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
