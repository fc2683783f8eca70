"""Logging event recorder - records director events as structured log lines."""
import itertools
import threading
from collections import deque
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional

from src.domain.base.ports.event_recorder_port import EventRecorderPort
from src.infrastructure.logging.logger import get_logger

MAX_EVENTS = 1000


class LoggingEventRecorder(EventRecorderPort):
    """
    Event recorder writing each event to the log for an audit trail.

    The latest ``max_events`` events are also kept in memory so callers can
    inspect them.
    """

    def __init__(self, user: str = "director", logger=None, max_events: int = MAX_EVENTS):
        self._user = user
        self._logger = logger or get_logger(__name__)
        self._counter = itertools.count(1)
        self._lock = threading.Lock()
        self._events: Deque[Dict[str, Any]] = deque(maxlen=max_events)

    @property
    def events(self) -> List[Dict[str, Any]]:
        return list(self._events)

    def record(
        self,
        action: str,
        object_type: str,
        object_name: Optional[str] = None,
        parent_id: Optional[str] = None,
        error: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Record an event and return its identifier."""
        with self._lock:
            event_id = str(next(self._counter))
            event = {
                "id": event_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "user": self._user,
                "action": action,
                "object_type": object_type,
                "object_name": object_name,
                "parent_id": parent_id,
                "error": error,
                "context": context or {},
            }
            self._events.append(event)

        self._logger.info("Event recorded", **{k: v for k, v in event.items() if v})
        return event_id
