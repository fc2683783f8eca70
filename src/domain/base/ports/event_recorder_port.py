"""Event recorder port for director events."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class EventRecorderPort(ABC):
    """Port for recording user-visible director events."""

    @abstractmethod
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
