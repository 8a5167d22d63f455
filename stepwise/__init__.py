"""Stepwise - track progress through an ordered set of exercises."""

__version__ = "0.1.0"
