"""Flatscript: flattens multi-fragment C# syntax trees into single-file scripts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("flatscript")
except PackageNotFoundError:
    __version__ = "dev"
