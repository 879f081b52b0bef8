"""
Core module for shared configuration and schemas.

This module provides foundational components used across the package:
- Configuration management (``query_expansion.core.config``, which loads
  the environment and is imported only by the default model client)
- Pydantic schemas for queries and reformulation settings
"""

from query_expansion.core.schemas import Metadata, Query, ReformulationConfig

__all__ = [
    "Metadata",
    "Query",
    "ReformulationConfig",
]
