"""Configuration, statistics, directory resolution and default handlers of a Total.js-style web framework."""

__version__ = "0.1.0"