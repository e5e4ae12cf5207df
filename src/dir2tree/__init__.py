"""Filtered directory inventories.

This package scans a directory, filters its entries with ignore-pattern rules
and renders the surviving tree both as a nested JSON-ready structure and as a
box-drawing glyph tree.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2tree")
except PackageNotFoundError:
    __version__ = "unknown"
