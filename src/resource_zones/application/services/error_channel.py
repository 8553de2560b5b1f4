"""Zone error channel.

ONLY failure notification - synchronous observer list a zone publishes
contained errors to. Handlers receive the original exception.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[BaseException], None]


@dataclass
class ErrorMetrics:
    """Error publishing metrics."""
    total_published: int = 0
    handler_failures: int = 0
    last_error_time: Optional[datetime] = None
    last_error: Optional[str] = None


class ErrorChannel:
    """Observer list for contained zone failures.
    
    Publishing never raises: a handler that fails is logged and the
    remaining handlers still run.
    """
    
    def __init__(self, name: str):
        self._name = name
        self._handlers: List[ErrorHandler] = []
        self._metrics = ErrorMetrics()
    
    @property
    def metrics(self) -> ErrorMetrics:
        return self._metrics
    
    def subscribe(self, handler: ErrorHandler) -> None:
        """Add a handler. Subscribing the same handler twice is a no-op."""
        if not callable(handler):
            raise TypeError("error handler must be callable")
        if handler not in self._handlers:
            self._handlers.append(handler)
    
    def unsubscribe(self, handler: ErrorHandler) -> bool:
        """Remove a handler, returning whether it was subscribed."""
        try:
            self._handlers.remove(handler)
            return True
        except ValueError:
            return False
    
    def clear(self) -> None:
        self._handlers.clear()
    
    def has_handlers(self) -> bool:
        return bool(self._handlers)
    
    def publish(self, error: BaseException) -> None:
        """Notify every handler of one error."""
        self._metrics.total_published += 1
        self._metrics.last_error_time = datetime.now(timezone.utc)
        self._metrics.last_error = f"{type(error).__name__}: {error}"
        
        # Copy so handlers may unsubscribe themselves
        for handler in list(self._handlers):
            try:
                handler(error)
            except Exception:
                self._metrics.handler_failures += 1
                logger.exception(f"Error handler failed on zone {self._name}")
