"""Building blocks for publish/subscribe messaging between local IoT nodes."""

__version__ = "0.1.0"