"""daygrid - calendar day aggregation for to-do lists."""

__version__ = "0.1.0"
