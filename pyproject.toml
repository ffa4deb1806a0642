[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoshelf"
version = "0.1.0"
description = "Classic data structures, small algorithms and a few console toys in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "avl-tree",
    "red-black-tree",
    "segment-tree",
    "binary-search-tree",
    "stack",
    "counting-sort",
    "euler-path",
    "word-frequency",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
    "Topic :: Education",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algoshelf-stack = "algoshelf.array_stack:main"
algoshelf-parens = "algoshelf.parentheses:main"
algoshelf-engine = "algoshelf.engine:main"
algoshelf-avl = "algoshelf.avl_tree:main"
algoshelf-bst = "algoshelf.binary_search_tree:main"
algoshelf-rbtree = "algoshelf.red_black_tree:main"
algoshelf-wordcount = "algoshelf.word_frequency:main"
algoshelf-threaded = "algoshelf.threaded_tree:main"
algoshelf-casino = "algoshelf.casino:main"
algoshelf-particles = "algoshelf.particles:main"

[tool.hatch.build.targets.wheel]
packages = ["algoshelf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
