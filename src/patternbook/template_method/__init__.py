"""Template Method: caffeine beverages.

Coffee and tea are made the same way: boil water, brew, pour into a cup, add
condiments. Only brewing and the condiments differ. Two separate recipes
duplicate the shared steps and let them drift apart.

``CaffeineBeverage.prepare_recipe`` is the template method. It fixes the
order of the steps, implements the ones that never change and leaves
``brew`` and ``add_condiments`` abstract for ``Coffee`` and ``Tea`` to fill
in. Subclasses supply steps, they never reorder them.

``customer_wants_condiments`` is a hook: a step with a default (yes) that a
subclass may override to steer the algorithm. ``Coffee`` overrides it to ask
the customer.

Don't call us, we'll call you: the base class calls down into the
subclasses, never the other way round.
"""

from .beverages import CaffeineBeverage, Coffee, Tea

__all__ = ["CaffeineBeverage", "Coffee", "Tea"]
