[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actionskit"
version = "0.1.0"
description = "Helpers for GitHub Actions steps: workflow commands, secret masking, job summaries, path and platform utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["github-actions", "workflow", "ci", "workflow-commands", "job-summary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["actionskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
