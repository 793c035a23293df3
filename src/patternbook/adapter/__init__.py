"""Adapter: turkeys posing as ducks, enumerations posing as iterators.

Client code speaks ``Duck``: it calls ``quack()`` and ``fly()``. We are short
on ducks but have turkeys, which ``gobble()`` and only fly short distances.
Rewriting the client for turkeys is not an option, and neither is touching
the turkey.

``TurkeyAdapter`` implements the interface the client expects and holds the
object that does the work. ``quack`` becomes ``gobble``; ``fly`` is as close
as a turkey gets. The client never learns it is talking to a turkey.
``DuckAdapter`` goes the other way and flies only one gobble in five, since
ducks cover far more distance than turkeys.

Adapters are also how old interfaces meet new ones. Legacy code hands out an
``Enumeration`` (``has_more_elements``/``next_element``); Python code wants
an iterator. ``EnumerationIterator`` maps one onto the other. Iterator APIs
in some languages also offer ``remove()``, which an enumeration has no way
to honour, so the adapter rejects it with ``UnsupportedOperationError``
rather than pretending. ``IteratorEnumeration`` maps the other direction.
"""

from .birds import Duck, DuckAdapter, MallardDuck, ThanksgivingTurkey, Turkey, TurkeyAdapter
from .enumeration import Enumeration, EnumerationIterator, IteratorEnumeration, ListEnumeration

__all__ = [
    "Duck",
    "Turkey",
    "MallardDuck",
    "ThanksgivingTurkey",
    "TurkeyAdapter",
    "DuckAdapter",
    "Enumeration",
    "ListEnumeration",
    "EnumerationIterator",
    "IteratorEnumeration",
]
