"""Daily programming puzzle solutions with Intcode and grid helpers."""

__version__ = "0.1.0"