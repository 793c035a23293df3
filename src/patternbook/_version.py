"""Version information for patternbook."""

__version__ = "1.0.0"
