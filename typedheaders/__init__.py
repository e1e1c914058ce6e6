"""Typed HTTP header fields that decode from and encode to raw header values."""

__version__ = "0.1.0"