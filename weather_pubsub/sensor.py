"""WeatherSensor: a publisher that announces temperature changes."""

import threading
from typing import TYPE_CHECKING

from weather_pubsub.event import TemperatureChanged
from weather_pubsub.publisher import Publisher

if TYPE_CHECKING:
    from weather_pubsub.config import Settings


class WeatherSensor(Publisher):
    """Simulated temperature sensor. Subscribers are notified only when the reading actually changes."""

    def __init__(
        self,
        sensor_id: str = "weather-sensor",
        initial_temperature: float = 0.0,
        isolate_errors: bool = False,
    ) -> None:
        super().__init__(sensor_id, isolate_errors=isolate_errors)
        self._temperature = float(initial_temperature)
        # Re-entrant so an observer may set the temperature from its own callback.
        self._change_lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "WeatherSensor":
        return cls(
            sensor_id=settings.sensor_id,
            initial_temperature=settings.initial_temperature,
            isolate_errors=settings.isolate_errors,
        )

    @property
    def sensor_id(self) -> str:
        return self.publisher_id

    @property
    def temperature(self) -> float:
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        self.set_temperature(value)

    def set_temperature(self, value: float) -> None:
        """
        Store a new reading and notify every subscriber if it differs from the current one.
        The reading is converted to float before comparing, so Decimal("24.8") equals a stored 24.8.
        Equal readings are a no-op. Observer failures propagate to the caller; the new value stays stored.

        Observers run while the change lock is held (unlike Publisher.notify, which holds no lock while
        calling observers). The lock is re-entrant, so an observer may set the temperature itself, but an
        observer that blocks on another thread which sets the temperature will deadlock.
        """
        value = float(value)
        with self._change_lock:
            previous = self._temperature
            if value == previous:
                self.metrics.increment("unchanged_sets")
                self._logger.debug(
                    "value_unchanged",
                    extra={"sensor_id": self.sensor_id, "temperature": previous},
                )
                return
            self._temperature = value
            self.metrics.increment("changes")
            self._logger.info(
                "value_changed",
                extra={"sensor_id": self.sensor_id, "previous": previous, "temperature": self._temperature},
            )
            self.notify(
                TemperatureChanged(
                    new_temperature=self._temperature,
                    previous_temperature=previous,
                    sensor_id=self.sensor_id,
                )
            )
