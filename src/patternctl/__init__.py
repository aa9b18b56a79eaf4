"""patternctl: classic creational and behavioral design patterns, runnable."""

__version__ = "0.1.0"
