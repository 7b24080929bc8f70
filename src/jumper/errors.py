# src/jumper/errors.py
from __future__ import annotations


class JumperError(Exception):
    """Base class for every error raised by the simulation core."""


class ViewportError(JumperError, ValueError):
    """Viewport dimensions are missing, zero or negative."""

    def __init__(self, width: float, height: float):
        super().__init__(f"viewport must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class NotInitializedError(JumperError, RuntimeError):
    """start()/restart() called before a viewport was supplied."""


class InvariantError(JumperError, AssertionError):
    """Internal state broke a fixed-size invariant. Always a bug."""
