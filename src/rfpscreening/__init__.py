"""Procurement request screening against a product catalog."""

__version__ = "0.1.0"
