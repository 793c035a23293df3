"""Observer demo."""
from patternbook.config.schemas import DemoConfig
from patternbook.registry import demo

from .displays import CurrentConditionsDisplay, StatisticsDisplay, TemperatureChangeDisplay
from .weather import WeatherData


@demo("observer", summary="Weather station pushing readings to subscribed displays")
def run(config: DemoConfig) -> None:
    data = WeatherData()
    CurrentConditionsDisplay(data)
    data.set_measurements(14.0, 30.0, 3.0)

    temperature_display = TemperatureChangeDisplay(data)
    data.set_measurements(20.0, 45.0, 15.0)
    data.set_measurements(23.0, 50.0, 69.0)

    print("-- Temperature display unsubscribes, statistics display joins --")
    temperature_display.unsubscribe()
    StatisticsDisplay(data)
    data.set_measurements(18.0, 55.0, 70.0)
