# utils/__init__.py
"""General utility functions for Lesson Forge."""

from .logging import setup_logging

__all__ = ["setup_logging"]
