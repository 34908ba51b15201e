"""Solutions to classic competitive-programming exercises, with small mail and shell helpers."""

__version__ = "0.1.0"