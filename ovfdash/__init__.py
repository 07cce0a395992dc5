"""Spinal OVF consult dashboard: duration metrics and aggregates over the consult sheet."""

__version__ = "0.1.0"
