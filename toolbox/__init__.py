"""Small command-line tools and reusable helpers: text, lines, bit sets,
deep equality, HTML links, image generators and issue search."""

__version__ = "0.1.0"