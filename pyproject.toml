[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstoolkit"
version = "0.1.0"
description = "Small data-structure tools: browser history stacks, an AVL address book, k-bit flips and an emergency-room priority queue"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "stack",
    "avl-tree",
    "heap",
    "priority-queue",
    "algorithms",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dstoolkit-browser = "dstoolkit.browser:main"
dstoolkit-addressbook = "dstoolkit.addressbook:main"
dstoolkit-bitflips = "dstoolkit.bitflips:main"
dstoolkit-triage = "dstoolkit.triage:main"

[tool.hatch.build.targets.wheel]
packages = ["dstoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
