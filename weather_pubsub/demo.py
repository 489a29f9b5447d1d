"""Canonical scenario: three displays follow one weather sensor through three readings."""

from typing import Iterable, Optional, TextIO

from weather_pubsub.config import Settings, load_settings
from weather_pubsub.displays import ConsoleDisplay, GuiDisplay, WebDashboard
from weather_pubsub.observability.logger import set_level
from weather_pubsub.sensor import WeatherSensor

DEMO_READINGS = (25.5, 26.0, 24.8)


def run_demo(
    readings: Iterable[float] = DEMO_READINGS,
    stream: Optional[TextIO] = None,
    settings: Optional[Settings] = None,
) -> WeatherSensor:
    """Subscribe console, GUI and web displays (in that order) and feed the readings to the sensor."""
    settings = settings or Settings()
    set_level(settings.log_level)
    sensor = WeatherSensor.from_settings(settings)

    for display in (ConsoleDisplay(stream=stream), GuiDisplay(stream=stream), WebDashboard(stream=stream)):
        display.subscribe(sensor)

    for reading in readings:
        sensor.temperature = reading
    return sensor


def main() -> None:
    run_demo(settings=load_settings())


if __name__ == "__main__":
    main()
