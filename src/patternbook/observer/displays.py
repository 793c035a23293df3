"""Display devices observing WeatherData."""
from abc import ABC, abstractmethod
from typing import List, Optional

from .subject import Subject
from .weather import WeatherMeasurements


class DisplayDevice(ABC):
    """Base display: subscribes on construction and can unsubscribe."""

    def __init__(self, subject: Subject[WeatherMeasurements]):
        self._subject = subject
        subject.register_observer(self)

    def unsubscribe(self) -> None:
        self._subject.remove_observer(self)

    @abstractmethod
    def update(self, state: WeatherMeasurements) -> None:
        ...

    @abstractmethod
    def display(self) -> None:
        ...


class CurrentConditionsDisplay(DisplayDevice):
    def __init__(self, subject: Subject[WeatherMeasurements]):
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = 0.0
        super().__init__(subject)

    def update(self, state: WeatherMeasurements) -> None:
        self.temperature = state.temperature
        self.humidity = state.humidity
        self.pressure = state.pressure
        self.display()

    def display(self) -> None:
        print(
            f"The current statistics: {self.temperature} celsius, "
            f"{self.humidity} humid and {self.pressure}kPa"
        )


class TemperatureChangeDisplay(DisplayDevice):
    def __init__(self, subject: Subject[WeatherMeasurements]):
        self.previous_temperature = 0.0
        self.new_temperature = 0.0
        super().__init__(subject)

    @property
    def change(self) -> float:
        return self.new_temperature - self.previous_temperature

    def update(self, state: WeatherMeasurements) -> None:
        self.previous_temperature = self.new_temperature
        self.new_temperature = state.temperature
        self.display()

    def display(self) -> None:
        print(
            f"The previous temperature was {self.previous_temperature} celsius, "
            f"it is now {self.new_temperature} celsius, an {self.change} change"
        )


class StatisticsDisplay(DisplayDevice):
    """Running min/max/average of the temperature."""

    def __init__(self, subject: Subject[WeatherMeasurements]):
        self._readings: List[float] = []
        super().__init__(subject)

    @property
    def minimum(self) -> Optional[float]:
        return min(self._readings) if self._readings else None

    @property
    def maximum(self) -> Optional[float]:
        return max(self._readings) if self._readings else None

    @property
    def average(self) -> Optional[float]:
        return sum(self._readings) / len(self._readings) if self._readings else None

    def update(self, state: WeatherMeasurements) -> None:
        self._readings.append(state.temperature)
        self.display()

    def display(self) -> None:
        print(f"Avg/Max/Min temperature = {self.average:.1f}/{self.maximum}/{self.minimum}")
