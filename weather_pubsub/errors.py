"""Error types raised by weather_pubsub."""

from typing import Any, List, Tuple


class WeatherPubSubError(Exception):
    """Base class for all weather_pubsub errors."""


class DeliveryError(WeatherPubSubError):
    """Raised after an isolated dispatch in which one or more observers failed."""

    def __init__(self, failures: List[Tuple[Any, BaseException]]) -> None:
        self.failures = list(failures)
        names = ", ".join(describe_observer(obs) for obs, _ in self.failures)
        super().__init__(f"{len(self.failures)} observer(s) failed during notification: {names}")


class ConfigError(WeatherPubSubError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, variable: str, reason: str) -> None:
        self.variable = variable
        super().__init__(f"Invalid value for {variable}: {reason}")


def describe_observer(observer: Any) -> str:
    name = getattr(observer, "name", None)
    if isinstance(name, str):
        return name
    return getattr(observer, "__qualname__", None) or repr(observer)
