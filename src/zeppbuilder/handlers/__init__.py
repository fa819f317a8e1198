"""Session handlers."""

from .builder import BuilderHandler

__all__ = ["BuilderHandler"]
