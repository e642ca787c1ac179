[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mosuser"
version = "0.1.0"
description = "User-space pieces of a small teaching operating system: address arithmetic, option scanning, path resolution and a shell front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating-system", "shell", "line-editor", "tokenizer", "paths", "teaching"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mosuser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
