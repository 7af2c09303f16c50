[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hermesaxiom"
version = "0.1.0"
description = "A small unified client for chat completion and embedding providers, driven by JSON model configuration."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["llm", "openai", "deepseek", "completion", "embeddings", "chat"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["hermesaxiom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
