"""Utility helpers for reusable functionality."""

from .datetime import ensure_naive_utc, utcnow

__all__ = ["ensure_naive_utc", "utcnow"]
