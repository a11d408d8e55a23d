"""Logging and path helpers."""
