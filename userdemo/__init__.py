"""A Flask web service that validates and stores users behind a uniform JSON result envelope."""

__version__ = "0.1.0"

__all__ = ["__version__"]