"""DECAF: Does Every Coffee Action, Friend."""

__version__ = "1.0.0"
