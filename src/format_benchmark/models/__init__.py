"""Data models for benchmarked records.

This module provides the Pydantic-validated `Person` model shared by every
format adapter.
"""

from .person import Person, UINT32_MAX

__all__ = ["Person", "UINT32_MAX"]
