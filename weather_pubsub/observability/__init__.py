"""Observability: logging and metrics for sensors and displays."""

from weather_pubsub.observability.logger import get_logger
from weather_pubsub.observability.metrics import Metrics

__all__ = ["get_logger", "Metrics"]
