"""Utility helpers for the :mod:`pipeline` package."""

from .logging import setup_logging

__all__ = ["setup_logging"]
