"""Language intelligence for Bread: catalog-backed completion, hover, signature help and lint."""

__version__ = "0.1.0"
