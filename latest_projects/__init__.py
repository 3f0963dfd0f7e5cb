"""Append a table of the viewer's latest pushed GitHub repositories to a README."""

from .runner import main, run

__all__ = ["main", "run"]
