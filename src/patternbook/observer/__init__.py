"""Observer: a weather station and the displays that follow it.

``WeatherData`` receives new readings from the station. Several displays want
them: one shows current conditions, one shows how much the temperature moved,
one keeps running statistics. Calling each display from ``set_measurements``
would hard-wire the subject to every concrete display, and adding a display
would mean editing the weather code.

Instead the weather data is a *subject*. It keeps an ordered list of
*observers* and knows only that each one has ``update(measurements)``.
Displays subscribe themselves, and whenever a new reading arrives the subject
walks its list and pushes the latest snapshot to each of them.

Subscribing and unsubscribing are immediate: an observer added now receives
the next reading, an observer removed now never hears from the subject again.
The subject and its observers are loosely coupled; either side can change as
long as the ``update`` contract holds.
"""

from .displays import CurrentConditionsDisplay, StatisticsDisplay, TemperatureChangeDisplay
from .subject import Observer, Subject
from .weather import WeatherData, WeatherMeasurements

__all__ = [
    "Observer",
    "Subject",
    "WeatherData",
    "WeatherMeasurements",
    "CurrentConditionsDisplay",
    "TemperatureChangeDisplay",
    "StatisticsDisplay",
]
