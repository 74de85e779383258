"""Utility helpers for date ranges and logging."""
