"""Admissions: workflow evaluation engine and HTTP API for multi-step admissions."""

__version__ = "1.0.0"
