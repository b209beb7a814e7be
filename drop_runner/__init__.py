"""Clean Drop Runner: a single-screen arcade runner simulation."""

__version__ = "0.1.0"
