"""Template method demo."""
from patternbook.config.schemas import DemoConfig
from patternbook.registry import demo

from .beverages import CaffeineBeverage, Coffee, Tea


@demo("template_method", summary="Coffee and tea sharing one recipe with a condiment hook")
def run(config: DemoConfig) -> None:
    tea: CaffeineBeverage = Tea()
    print("-- Making tea --")
    tea.prepare_recipe()

    if config.coffee_answer is None:
        coffee: CaffeineBeverage = Coffee()
    else:
        answer = config.coffee_answer
        coffee = Coffee(ask=lambda: answer)
    print("-- Making coffee --")
    coffee.prepare_recipe()
