[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdrills"
version = "0.1.0"
description = "Small data structures and text utilities: a double-ended queue, a FIFO queue, a growable array, a table encoder, temperature tables, a line editor and a zlib file reader."
requires-python = ">=3.10"
dependencies = []
keywords = ["deque", "queue", "data-structures", "zlib", "temperature", "encoder", "line-editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
cdrills-growable-array = "cdrills.growable_array:main"
cdrills-string-encoder = "cdrills.string_encoder:main"
cdrills-temperature = "cdrills.temperature:main"
cdrills-line-editor = "cdrills.line_editor:main"
cdrills-zlib-reader = "cdrills.zlib_reader:main"

[tool.hatch.build.targets.wheel]
packages = ["cdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
