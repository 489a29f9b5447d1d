import logging

from weather_pubsub.event import TemperatureChanged
from weather_pubsub.observability import Metrics, get_logger
from weather_pubsub.observability.logger import set_level


def test_metrics_counters_gauges_and_snapshot():
    metrics = Metrics()
    metrics.increment("changes")
    metrics.increment("changes", 2)
    metrics.set_gauge("subscribers", 3)

    assert metrics.get_counter("changes") == 3
    assert metrics.get_counter("missing") == 0
    assert metrics.snapshot() == {"counters": {"changes": 3}, "gauges": {"subscribers": 3}}


def test_get_logger_adds_a_single_handler():
    first = get_logger("weather_pubsub.test.single")
    second = get_logger("weather_pubsub.test.single")

    assert first is second
    assert len(first.handlers) == 1


def test_set_level_applies_to_existing_loggers():
    logger = get_logger("weather_pubsub.test.levels")
    try:
        set_level("info")
        assert logger.level == logging.INFO
        assert get_logger("weather_pubsub.test.levels.new").level == logging.INFO
    finally:
        set_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_change_is_logged_at_info(sensor, caplog):
    with caplog.at_level(logging.INFO, logger="weather_pubsub.publisher.test-sensor"):
        sensor.temperature = 3.0

    assert [r.getMessage() for r in caplog.records] == ["value_changed"]
    assert caplog.records[0].temperature == 3.0


def test_event_to_dict():
    event = TemperatureChanged(new_temperature=2.0, previous_temperature=1.0, sensor_id="s")

    data = event.to_dict()

    assert data["new_temperature"] == 2.0
    assert data["previous_temperature"] == 1.0
    assert data["sensor_id"] == "s"
    assert data["timestamp"].endswith("+00:00")


def test_display_subscription_is_logged_once(sensor, caplog):
    from weather_pubsub.displays import ConsoleDisplay

    display = ConsoleDisplay()
    with caplog.at_level(logging.INFO, logger="weather_pubsub.publisher.test-sensor"):
        with caplog.at_level(logging.INFO, logger="weather_pubsub.subscriber.Console Display"):
            display.subscribe(sensor)
            display.unsubscribe(sensor)

    messages = [r.getMessage() for r in caplog.records]
    assert messages.count("subscribed") == 1
    assert messages.count("unsubscribed") == 1


def test_metrics_reads_during_concurrent_writes():
    import threading

    metrics = Metrics()
    seen = []

    def writer():
        for _ in range(1000):
            metrics.increment("changes")

    def reader():
        for _ in range(1000):
            seen.append(metrics.get_counter("changes"))

    threads = [threading.Thread(target=writer) for _ in range(3)] + [threading.Thread(target=reader)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert metrics.get_counter("changes") == 3000
    assert seen == sorted(seen)
