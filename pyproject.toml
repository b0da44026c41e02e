[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternsearch"
version = "0.1.0"
description = "Case-insensitive pattern search over concatenated text corpora with KMP, Rabin-Karp and Boyer-Moore"
requires-python = ">=3.10"
dependencies = []
keywords = ["string search", "kmp", "rabin-karp", "boyer-moore", "pattern matching", "corpus"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternsearch-kmp = "patternsearch.kmp:main"
patternsearch-rk = "patternsearch.rabin_karp:main"
patternsearch-bm = "patternsearch.boyer_moore:main"
patternsearch-concat = "patternsearch.concatenate:main"

[tool.hatch.build.targets.wheel]
packages = ["patternsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
