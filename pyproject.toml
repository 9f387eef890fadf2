[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "auxtext"
version = "0.1.0"
description = "Small text utilities: delimited-field streams, template tokens, HTML escaping and system error messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "delimited", "template", "mustache", "html-escape", "errors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["auxtext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
