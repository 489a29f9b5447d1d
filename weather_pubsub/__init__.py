"""In-process publish-subscribe for a weather sensor and its displays (synchronous, no broker)."""

from weather_pubsub.event import TemperatureChanged
from weather_pubsub.publisher import Publisher
from weather_pubsub.sensor import WeatherSensor
from weather_pubsub.subscriber import Subscriber
from weather_pubsub.displays import ConsoleDisplay, DisplaySubscriber, GuiDisplay, WebDashboard
from weather_pubsub.errors import ConfigError, DeliveryError, WeatherPubSubError

__all__ = [
    "TemperatureChanged",
    "Publisher",
    "WeatherSensor",
    "Subscriber",
    "DisplaySubscriber",
    "ConsoleDisplay",
    "GuiDisplay",
    "WebDashboard",
    "WeatherPubSubError",
    "DeliveryError",
    "ConfigError",
]
