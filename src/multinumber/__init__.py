"""MultiNumberBox: three numeric fields edited as one comma-separated value."""

__version__ = "0.1.0"
