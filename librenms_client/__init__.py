"""Building blocks for a LibreNMS API client: alerts, alert rules, devices and locations."""

__version__ = "0.1.0"

__all__ = ["__version__"]