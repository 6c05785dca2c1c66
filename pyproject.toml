[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orderladder"
version = "0.1.0"
description = "A small single-symbol limit order book with a matching thread, a TCP order feed and a live console ladder."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["order book", "matching engine", "trading", "limit order", "tcp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orderladder-server = "orderladder.server:main"
orderladder-client = "orderladder.client:main"

[tool.hatch.build.targets.wheel]
packages = ["orderladder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
