"""Routes package initialization."""

from . import health

__all__ = ['health']
