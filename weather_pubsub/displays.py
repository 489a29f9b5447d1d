"""Display subscribers. The GUI and web dashboard are simulated with console lines."""

from typing import TYPE_CHECKING, Optional, TextIO

from weather_pubsub.subscriber import Subscriber

if TYPE_CHECKING:
    from weather_pubsub.event import TemperatureChanged


def format_temperature(value: float) -> str:
    """Shortest round-trip form of value, without a trailing '.0' (26.0 -> '26')."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_notification(name: str, value: float) -> str:
    return f"{name}: Temperature changed to {format_temperature(value)}°C"


class DisplaySubscriber(Subscriber):
    """Subscriber that prints one notification line per change (override render for a custom line)."""

    display_name = "Display"

    def __init__(self, name: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
        super().__init__(name or self.display_name)
        self._stream = stream

    def render(self, event: "TemperatureChanged") -> str:
        return format_notification(self.name, event.new_temperature)

    def on_temperature_changed(self, event: "TemperatureChanged") -> None:
        # stream=None resolves sys.stdout at call time
        print(self.render(event), file=self._stream)
        self._logger.debug(
            "displayed",
            extra={"subscriber": self.name, "sensor_id": event.sensor_id, "temperature": event.new_temperature},
        )


class ConsoleDisplay(DisplaySubscriber):
    display_name = "Console Display"


class GuiDisplay(DisplaySubscriber):
    display_name = "GUI Display"


class WebDashboard(DisplaySubscriber):
    display_name = "Web Dashboard"
