"""Data types, filter arguments and version helpers for the container engine HTTP API."""

__version__ = "0.1.0"