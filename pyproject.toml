[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordhash"
version = "0.1.0"
description = "Straight-line Boggle word search, a base-36 string hash, an MT19937 generator and an open-addressing hash table with linear and double-hash probing"
requires-python = ">=3.10"
dependencies = []
keywords = ["boggle", "hash", "hash table", "open addressing", "double hashing", "mersenne twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordhash-boggle = "wordhash.boggle:main"
wordhash-strhash = "wordhash.strhash:main"
wordhash-ht-demo = "wordhash.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["wordhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
