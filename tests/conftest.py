import pytest

from weather_pubsub.sensor import WeatherSensor


class Recorder:
    """Callable observer that records (label, new_temperature) into a shared log."""

    def __init__(self, label, log=None):
        self.name = label
        self.log = log if log is not None else []

    def __call__(self, event):
        self.log.append((self.name, event.new_temperature))


@pytest.fixture
def sensor():
    return WeatherSensor("test-sensor")


@pytest.fixture
def recorder_factory():
    log = []

    def make(label):
        return Recorder(label, log)

    make.log = log
    return make
