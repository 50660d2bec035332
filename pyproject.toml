[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytekit"
version = "0.1.0"
description = "Small helpers for ASCII characters, 32-bit numbers, byte buffers, NUL-terminated strings and singly linked lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "bytes", "buffers", "linked list", "atoi", "itoa", "ascii"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bytekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
