"""seqforge: stateless sequence transformations and small generic utilities."""

__version__ = "0.1.0"
