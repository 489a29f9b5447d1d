"""Publisher base: an ordered registry of observer callbacks and synchronous dispatch."""

import threading
from typing import Any, Callable, List, Tuple

from weather_pubsub.errors import DeliveryError, describe_observer
from weather_pubsub.observability import Metrics, get_logger

Observer = Callable[[Any], None]


class Publisher:
    """
    Holds observer callbacks in registration order and calls each of them for every event.

    Duplicate subscriptions are kept: an observer subscribed twice is called twice per event.
    Dispatch iterates a snapshot of the registry, so observers may subscribe or unsubscribe
    (themselves or others) from inside a callback or from another thread.

    By default dispatch is fail-fast: the first observer exception propagates and the
    remaining observers are skipped. With isolate_errors=True every observer runs, failures
    are logged, and one DeliveryError listing them is raised at the end.
    """

    def __init__(self, publisher_id: str, isolate_errors: bool = False) -> None:
        self._publisher_id = publisher_id
        self._observers: List[Observer] = []
        self._lock = threading.Lock()
        self.isolate_errors = isolate_errors
        self.metrics = Metrics()
        self._logger = get_logger(f"weather_pubsub.publisher.{publisher_id}")

    @property
    def publisher_id(self) -> str:
        return self._publisher_id

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._observers)

    def subscribe(self, observer: Observer) -> None:
        """Append an observer; it is notified after every observer registered before it."""
        if not callable(observer):
            raise TypeError(f"observer must be callable, got {type(observer).__name__}")
        with self._lock:
            self._observers.append(observer)
            count = len(self._observers)
        self.metrics.set_gauge("subscribers", count)
        self._logger.info(
            "subscribed",
            extra={"publisher_id": self._publisher_id, "observer": describe_observer(observer), "subscribers": count},
        )

    def unsubscribe(self, observer: Observer) -> bool:
        """Remove the most recent registration of observer. Returns False if it was not registered."""
        with self._lock:
            for index in range(len(self._observers) - 1, -1, -1):
                if self._observers[index] == observer:
                    del self._observers[index]
                    break
            else:
                return False
            count = len(self._observers)
        self.metrics.set_gauge("subscribers", count)
        self._logger.info(
            "unsubscribed",
            extra={"publisher_id": self._publisher_id, "observer": describe_observer(observer), "subscribers": count},
        )
        return True

    def get_subscribers(self) -> List[Observer]:
        """Return a copy of the registry (under lock), in notification order."""
        with self._lock:
            return list(self._observers)

    def clear(self) -> None:
        """Drop every registration."""
        with self._lock:
            self._observers.clear()
        self.metrics.set_gauge("subscribers", 0)

    def notify(self, event: Any) -> None:
        """Call every registered observer with event, in registration order. Copy the registry under lock, then call without holding it."""
        observers = self.get_subscribers()
        self._logger.debug(
            "notifying",
            extra={"publisher_id": self._publisher_id, "subscriber_count": len(observers)},
        )
        failures: List[Tuple[Observer, BaseException]] = []
        for observer in observers:
            try:
                observer(event)
            except Exception as e:
                self.metrics.increment("delivery_failures")
                if not self.isolate_errors:
                    raise
                self._logger.exception(
                    "delivery_failed",
                    extra={
                        "publisher_id": self._publisher_id,
                        "observer": describe_observer(observer),
                        "error": str(e),
                    },
                )
                failures.append((observer, e))
            else:
                self.metrics.increment("notifications_delivered")
        if failures:
            raise DeliveryError(failures)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._publisher_id!r}, subscribers={self.subscriber_count})"

