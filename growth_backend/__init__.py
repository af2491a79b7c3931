"""Rating aggregation and pie geometry for the student growth dashboard."""

__version__ = "0.1.0"
