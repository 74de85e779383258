"""Availability and pricing quotes for vacation rental stays."""

__version__ = "0.1.0"
