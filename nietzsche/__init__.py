"""Image and PDF processing toolkit with a small HTTP upload service."""

__version__ = "0.1.0"