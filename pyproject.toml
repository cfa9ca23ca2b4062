[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpstack"
version = "0.1.0"
description = "Building blocks of a user-space TCP: wrapping sequence numbers, bounded byte streams, a stream reassembler and a TCP receiver."
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "networking", "reassembler", "byte-stream", "sequence-numbers", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tcpstack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
