"""Subscriber base for displays that follow a sensor; instances are themselves the observer callback."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from weather_pubsub.observability import get_logger

if TYPE_CHECKING:
    from weather_pubsub.event import TemperatureChanged
    from weather_pubsub.publisher import Publisher


class Subscriber(ABC):
    """Abstract base class for subscribers that react to temperature changes. Instances are callable observers."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._logger = get_logger(f"weather_pubsub.subscriber.{name}")

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def on_temperature_changed(self, event: "TemperatureChanged") -> None:
        """Handle a change notification. Must be implemented by subclasses."""
        pass

    def __call__(self, event: "TemperatureChanged") -> None:
        self.on_temperature_changed(event)

    def subscribe(self, publisher: "Publisher") -> None:
        """Register this subscriber with a publisher."""
        publisher.subscribe(self)

    def unsubscribe(self, publisher: "Publisher") -> bool:
        """Remove one registration of this subscriber from a publisher."""
        return publisher.unsubscribe(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"
