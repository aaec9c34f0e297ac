"""Track food-bank donors, recipients, donations and food requests."""

__version__ = "0.1.0"