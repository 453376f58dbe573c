[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hecore"
version = "0.1.0"
description = "Core engine utilities: hashing, UTF decoding, packed vectors, allocators, file access, a spinning mutex, build info and swapchain selection helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashing", "fnv", "utf-8", "utf-16", "allocator", "ring-buffer", "swapchain", "engine"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
