"""Version information for neo-pagination."""

__version__ = "0.1.0"
