"""REST proxy for the Docker Engine API."""

__version__ = "1.0.0"
