"""webkick: web application skeleton generator."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("webkick")
except PackageNotFoundError:
    __version__ = "0.0.0"
