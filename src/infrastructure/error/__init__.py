"""Error handling infrastructure."""

from .error_ignorer import ErrorIgnorer

__all__ = ["ErrorIgnorer"]
