"""Read/write throughput benchmark for textual serialization formats."""

__version__ = "0.1.0"
