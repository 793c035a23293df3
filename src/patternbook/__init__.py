"""patternbook - Root Package.

Runnable, narrated walkthroughs of the classic object-oriented design
patterns. Every pattern lives in its own subpackage, and every subpackage
docstring carries the narrated explanation printed by ``patternbook explain``.

Key Components:
    - strategy: interchangeable fly/quack behaviours for ducks
    - observer: a weather station broadcasting readings to displays
    - decorator: condiments wrapping beverages, and a lower-casing stream
    - factory: pizza stores (Factory Method) and ingredient families (Abstract Factory)
    - singleton: chocolate boilers and the lazy-initialization race
    - template_method: caffeine beverages with a condiment hook
    - adapter: turkeys posing as ducks, enumerations posing as iterators
    - command: a remote control with undo and a null command
    - facade: a home theatre behind two buttons

Supporting packages:
    - config: pydantic configuration schemas and loading
    - infrastructure: logging setup
    - cli: the ``patternbook`` demo runner
"""

from ._version import __version__

__author__ = "patternbook contributors"
