"""Battery-swap subscription vs. ownership economics calculator."""

__version__ = "1.0.0"
