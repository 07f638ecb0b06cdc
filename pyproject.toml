[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carehub"
version = "0.1.0"
description = "Hospital records toolkit: users, clinics, drugs, prescriptions, ambulances and a location map, built on small self-contained data structures."
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "pharmacy", "data-structures", "trie", "bst", "dijkstra", "sha256"]
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
packages = ["carehub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
