[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repovis"
version = "0.36.0"
description = "Settings, version-control log parsing and scene logic for animated repository history visualisation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "version control",
    "visualisation",
    "mercurial",
    "subversion",
    "commit log",
    "history",
]
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
    "Topic :: Software Development :: Version Control",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["repovis"]

[tool.hatch.build.targets.sdist]
include = ["repovis", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
