"""Version information for kalle."""

__version__ = "0.3.0"
