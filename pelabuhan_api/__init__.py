"""HTTP API server for countries, ports and goods fetched from an upstream API."""

__version__ = "1.0.0"