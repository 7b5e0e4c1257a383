"""Command-line interface for webkick."""

from webkick.cli.app import app

__all__ = ["app"]
