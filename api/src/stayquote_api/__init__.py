"""FastAPI application for stay availability and pricing quotes."""

__version__ = "0.1.0"
