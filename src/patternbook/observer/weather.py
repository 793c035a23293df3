"""Weather data subject."""
from pydantic import BaseModel, ConfigDict

from .subject import Subject


class WeatherMeasurements(BaseModel):
    """Immutable snapshot of one reading."""
    model_config = ConfigDict(frozen=True)

    temperature: float = 0.0
    humidity: float = 0.0
    pressure: float = 0.0


class WeatherData(Subject[WeatherMeasurements]):
    """The weather station's subject: every new reading is broadcast."""

    def __init__(self):
        super().__init__()
        self._measurements = WeatherMeasurements()

    @property
    def measurements(self) -> WeatherMeasurements:
        """Latest reading, for observers that prefer to pull."""
        return self._measurements

    def current_state(self) -> WeatherMeasurements:
        return self._measurements

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        self._measurements = WeatherMeasurements(
            temperature=temperature, humidity=humidity, pressure=pressure
        )
        self.measurements_changed()

    def measurements_changed(self) -> None:
        self.notify_observers()
