"""Search the iTunes catalog and keep the latest copy of every result."""

__version__ = "0.1.0"
