"""Tests for the weather station observers."""
from unittest.mock import Mock

import pytest
from pydantic import ValidationError as PydanticValidationError

from patternbook.observer import (
    CurrentConditionsDisplay,
    StatisticsDisplay,
    TemperatureChangeDisplay,
    WeatherData,
    WeatherMeasurements,
)
from patternbook.observer.displays import DisplayDevice


class RecordingObserver:
    def __init__(self):
        self.received = []

    def update(self, state):
        self.received.append(state)


class TestSubject:
    def test_latest_snapshot_reaches_every_observer(self):
        data = WeatherData()
        first, second = RecordingObserver(), RecordingObserver()
        data.register_observer(first)
        data.register_observer(second)

        data.set_measurements(20.0, 45.0, 15.0)

        expected = WeatherMeasurements(temperature=20.0, humidity=45.0, pressure=15.0)
        assert first.received == [expected]
        assert second.received == [expected]
        assert data.measurements == expected

    def test_removed_observer_hears_nothing(self):
        data = WeatherData()
        kept, removed = RecordingObserver(), RecordingObserver()
        data.register_observer(kept)
        data.register_observer(removed)
        data.remove_observer(removed)

        data.set_measurements(1.0, 2.0, 3.0)

        assert len(kept.received) == 1
        assert removed.received == []

    def test_notification_order_follows_registration(self):
        data = WeatherData()
        calls = []
        for name in ("a", "b", "c"):
            observer = Mock()
            observer.update.side_effect = lambda state, name=name: calls.append(name)
            data.register_observer(observer)

        data.notify_observers()

        assert calls == ["a", "b", "c"]

    def test_register_is_idempotent_and_remove_unknown_is_noop(self):
        data = WeatherData()
        observer = RecordingObserver()
        data.register_observer(observer)
        data.register_observer(observer)
        data.remove_observer(RecordingObserver())

        data.notify_observers()

        assert data.observers == [observer]
        assert len(observer.received) == 1

    def test_observer_removed_during_broadcast_still_gets_current_cycle(self):
        data = WeatherData()
        late = RecordingObserver()

        class Remover:
            def update(self, state):
                data.remove_observer(late)

        data.register_observer(Remover())
        data.register_observer(late)

        data.set_measurements(1.0, 1.0, 1.0)
        data.set_measurements(2.0, 2.0, 2.0)

        assert [state.temperature for state in late.received] == [1.0]

    def test_failing_observer_does_not_stop_broadcast(self):
        data = WeatherData()
        broken = Mock()
        broken.update.side_effect = RuntimeError("display unplugged")
        healthy = RecordingObserver()
        data.register_observer(broken)
        data.register_observer(healthy)

        data.set_measurements(5.0, 5.0, 5.0)

        assert len(healthy.received) == 1

    def test_measurements_are_frozen(self):
        with pytest.raises(PydanticValidationError):
            WeatherMeasurements().temperature = 3.0


class TestDisplays:
    def test_current_conditions(self, capsys):
        data = WeatherData()
        CurrentConditionsDisplay(data)
        data.set_measurements(14.0, 30.0, 3.0)
        assert capsys.readouterr().out == (
            "The current statistics: 14.0 celsius, 30.0 humid and 3.0kPa\n"
        )

    def test_temperature_change_starts_from_zero(self, capsys):
        data = WeatherData()
        display = TemperatureChangeDisplay(data)
        data.set_measurements(20.0, 45.0, 15.0)
        data.set_measurements(23.0, 50.0, 69.0)

        assert capsys.readouterr().out.splitlines() == [
            "The previous temperature was 0.0 celsius, it is now 20.0 celsius, an 20.0 change",
            "The previous temperature was 20.0 celsius, it is now 23.0 celsius, an 3.0 change",
        ]
        assert display.change == 3.0

    def test_unsubscribe(self, capsys):
        data = WeatherData()
        display = CurrentConditionsDisplay(data)
        display.unsubscribe()
        data.set_measurements(1.0, 1.0, 1.0)

        assert capsys.readouterr().out == ""
        assert display not in data.observers

    def test_statistics(self):
        data = WeatherData()
        stats = StatisticsDisplay(data)
        assert stats.average is None

        for temperature in (10.0, 20.0, 30.0):
            data.set_measurements(temperature, 0.0, 0.0)

        assert stats.minimum == 10.0
        assert stats.maximum == 30.0
        assert stats.average == 20.0

    def test_display_without_overrides_cannot_be_built(self):
        class HalfDisplay(DisplayDevice):
            def update(self, state):
                pass

        data = WeatherData()
        with pytest.raises(TypeError):
            HalfDisplay(data)
        assert data.observers == []
