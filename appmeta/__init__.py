"""In-memory application metadata service with partial-match search."""

__version__ = "0.1.0"
