"""Price-range AMM curve math, parameter validation, keys and event records."""

__version__ = "0.1.0"