[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniedit"
version = "0.0.2"
description = "Building blocks for a minimal terminal text editor, with small helpers for system-header values and bit layouts"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "text", "libc", "icmp", "bitset"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
miniedit-hello = "miniedit.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["miniedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
