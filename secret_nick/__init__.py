"""Secret Nick API - room membership backend for a gift exchange."""

__version__ = "1.0.0"
