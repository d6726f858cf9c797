"""containerize-py - generate a Containerfile and .containerignore for a Python project."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("containerize-py")
except PackageNotFoundError:
    __version__ = "[unknown]"
