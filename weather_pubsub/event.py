"""Notification payload passed to subscribers when a sensor value changes."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TemperatureChanged:
    """Immutable record of a single temperature change."""

    new_temperature: float
    previous_temperature: Optional[float] = None
    sensor_id: str = ""
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        """Serialize event for logging or transport."""
        return {
            "sensor_id": self.sensor_id,
            "new_temperature": self.new_temperature,
            "previous_temperature": self.previous_temperature,
            "timestamp": self.timestamp.isoformat(),
        }
