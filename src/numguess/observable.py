import logging
from threading import RLock
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StateHolder(Generic[T]):
    """Holds the latest published value and notifies subscribers on change.

    Subscribers are invoked synchronously, in registration order, on the thread
    that calls :meth:`set`. A failing subscriber is logged and skipped so that
    publication always completes.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subs: List[Callable[[T], None]] = []
        self._lock = RLock()

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[T], None]:
        """Register a callback receiving each newly published value.

        Args:
            callback: A function accepting the published value.

        Returns:
            The callback, so it can be passed to :meth:`unsubscribe` later.
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        with self._lock:
            self._subs.append(callback)
            logger.debug("Subscribed %s", getattr(callback, "__name__", str(callback)))
        return callback

    def unsubscribe(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            if callback in self._subs:
                self._subs.remove(callback)
                logger.debug("Unsubscribed %s", getattr(callback, "__name__", str(callback)))

    def set(self, value: T) -> None:
        """Publish ``value`` as the latest state and notify subscribers."""
        with self._lock:
            self._value = value
            subs = list(self._subs)
        logger.debug("Publishing %r to %d subscribers", value, len(subs))
        for cb in subs:
            try:
                cb(value)
            except Exception:
                logger.exception("Unhandled exception in state subscriber")
