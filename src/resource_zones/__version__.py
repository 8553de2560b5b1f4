"""Version information for resource-zones."""

__version__ = "1.0.0"
