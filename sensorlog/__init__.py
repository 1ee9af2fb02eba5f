"""Tools to generate, split by sensor and search timestamped sensor logs."""

__version__ = "0.1.0"

__all__ = ["generator", "lookup", "splitter"]