"""Herald: authenticated application webhook receiver."""

__version__ = "1.0.0"
