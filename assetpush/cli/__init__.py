"""Command line interface for assetpush."""

from assetpush.cli.app import app, main


__all__ = ["app", "main"]
