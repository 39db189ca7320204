[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mhwgui"
version = "0.1.0"
description = "Data model and file helpers for GUI layout files: enums, headers, key-value buffers, string tables, rich text, editor paths, settings and TEX textures"
requires-python = ">=3.11"
keywords = ["gui", "file-format", "texture", "tex", "dds", "rich-text", "string-table", "toml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mhwgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
