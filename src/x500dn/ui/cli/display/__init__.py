"""Console rendering helpers for the CLI."""

from .components import ComponentDisplay

__all__ = ["ComponentDisplay"]
