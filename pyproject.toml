[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storybalance"
version = "0.1.0"
description = "Outcome-balancing decision tree and prompt assembly for model-driven interactive stories"
requires-python = ">=3.10"
dependencies = []
keywords = ["interactive fiction", "decision tree", "game balance", "prompt", "story"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["storybalance"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
