"""namestore: files stored under arbitrary logical names."""

__version__ = "0.1.0"
