"""Rekro - rental pricing and tenant profile completion."""

__version__ = "0.1.0"
