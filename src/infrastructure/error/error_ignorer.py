"""Force-aware error suppression for destructive CPI calls."""

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, TypeVar

from src.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class ErrorIgnorer:
    """
    Runs operations under a force policy.

    With ``force`` enabled any ``Exception`` raised inside the scope is logged
    and swallowed; otherwise it propagates unchanged. Suppression is
    all-or-nothing per scope.
    """

    def __init__(self, force: bool, logger=None):
        self._force = force
        self._logger = logger or get_logger(__name__)

    @property
    def force(self) -> bool:
        return self._force

    @contextmanager
    def with_force_check(self) -> Iterator[None]:
        """Context manager applying the force policy to its body."""
        try:
            yield
        except Exception as e:
            if not self._force:
                raise
            self._logger.error(
                f"Force deleting is set, ignoring exception: {type(e).__name__}: {e}",
                exc_info=True,
            )

    def run(self, operation: Callable[..., T], *args: Any, **kwargs: Any) -> Optional[T]:
        """
        Run an operation under the force policy.

        Returns:
            The operation's result, or None when an error was suppressed
        """
        with self.with_force_check():
            return operation(*args, **kwargs)
        return None
