"""
Demo catalog.

Every pattern package exposes a ``demo`` module whose ``run`` function is
marked with the :func:`demo` decorator. The decorator records the callable
in a module-level registry; :func:`load_demos` imports the demo modules so
that registration happens, and the CLI reads the catalog from here.

Usage:
    @demo("observer", summary="Weather station pushing readings to displays")
    def run(config: DemoConfig) -> None:
        ...
"""
from __future__ import annotations

import importlib
import inspect
from dataclasses import dataclass
from typing import Callable, Dict, List, TypeVar

from patternbook.core.exceptions import DemoNotFoundError
from patternbook.infrastructure.logging.logger import get_logger

TDemo = TypeVar("TDemo", bound=Callable[..., None])

# Pattern subpackages, in the order the demos are meant to be read
PATTERN_PACKAGES = (
    "strategy",
    "observer",
    "decorator",
    "factory",
    "singleton",
    "template_method",
    "adapter",
    "command",
    "facade",
)


@dataclass(frozen=True)
class DemoEntry:
    """A registered demo."""
    name: str
    summary: str
    package: str
    run: Callable[..., None]

    @property
    def narration(self) -> str:
        """The narrated explanation kept in the pattern package docstring."""
        module = importlib.import_module(self.package)
        return inspect.cleandoc(module.__doc__ or "")

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "summary": self.summary, "package": self.package}


_demo_registry: Dict[str, DemoEntry] = {}


def demo(name: str, summary: str):
    """
    Mark a function as the runnable demo of a pattern.

    Args:
        name: Catalog name used on the command line
        summary: One-line description shown by ``patternbook list``

    Returns:
        Decorated function, unchanged
    """
    def decorator(func: TDemo) -> TDemo:
        package = func.__module__.rsplit(".", 1)[0]
        _demo_registry[name] = DemoEntry(name=name, summary=summary, package=package, run=func)

        # Mark the function for discovery
        func._demo_name = name
        return func

    return decorator


def load_demos() -> List[DemoEntry]:
    """Import every pattern's demo module and return the catalog in reading order."""
    logger = get_logger(__name__)
    for package in PATTERN_PACKAGES:
        importlib.import_module(f"patternbook.{package}.demo")
    logger.debug(f"Loaded {len(_demo_registry)} demos")
    return get_registered_demos()


def get_registered_demos() -> List[DemoEntry]:
    """Get all registered demos, ordered as in PATTERN_PACKAGES."""
    order = {package: index for index, package in enumerate(PATTERN_PACKAGES)}
    return sorted(
        _demo_registry.values(),
        key=lambda entry: (order.get(entry.package.rsplit(".", 1)[-1], len(order)), entry.name),
    )


def get_demo(name: str) -> DemoEntry:
    """Get a demo by catalog name."""
    if name not in _demo_registry:
        raise DemoNotFoundError(name, list(_demo_registry))
    return _demo_registry[name]
