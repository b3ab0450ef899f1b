"""Shop administration backend: products, users and catalog management."""

__version__ = "0.1.0"
