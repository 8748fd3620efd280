"""Decide whether paths are ignored using gitignore rules, globs or regular expressions."""

__version__ = "0.1.0"