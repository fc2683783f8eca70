"""Event recording infrastructure."""

from .event_recorder import LoggingEventRecorder

__all__ = ["LoggingEventRecorder"]
