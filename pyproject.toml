[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolbox"
version = "0.1.0"
description = "Small command-line tools and libraries: text and line utilities, bit sets, deep equality, HTML link extraction, image generators and issue search."
requires-python = ">=3.10"
keywords = [
    "utilities",
    "palindrome",
    "bitset",
    "deep-equality",
    "html",
    "links",
    "mandelbrot",
    "bzip2",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
toolbox-textutil = "toolbox.textutil:main"
toolbox-lines = "toolbox.lines:main"
toolbox-echo = "toolbox.echo:main"
toolbox-graph = "toolbox.graph:main"
toolbox-growth = "toolbox.growth:main"
toolbox-bzip = "toolbox.bzip:main"
toolbox-fetch = "toolbox.fetch:main"
toolbox-htmltree = "toolbox.htmltree:main"
toolbox-links = "toolbox.links:main"
toolbox-images = "toolbox.images:main"
toolbox-github = "toolbox.github:main"

[tool.hatch.build.targets.wheel]
packages = ["toolbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
