"""Contact-form intake service for a personal portfolio site."""

__version__ = "0.1.0"
