"""Classic algorithm and data-structure routines in plain Python."""

__version__ = "0.1.0"