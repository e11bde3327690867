"""A strict JSON parser and generator with a mutable value tree."""

__version__ = "0.1.0"
__all__ = ["parser", "stringify", "value"]