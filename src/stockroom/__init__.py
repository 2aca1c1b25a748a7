"""Stockroom: a small inventory tracker with a CLI and an HTTP API."""

__version__ = "0.1.0"
