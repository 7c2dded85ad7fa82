"""Client for the Apache Ignite REST API, and a command that exercises it."""

__version__ = "0.1.0"
__all__ = ["client", "demo"]