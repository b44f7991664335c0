"""Validated trading values, trade calculations and an async REST base client for LN Markets."""

__version__ = "0.3.0"