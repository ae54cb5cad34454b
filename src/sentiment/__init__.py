"""Rules engine for the Sentiment tabletop game system."""

__version__ = "0.1.0"
