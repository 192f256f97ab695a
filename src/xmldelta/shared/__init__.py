"""Shared utilities for delta recording and encoding.

This module provides the configuration object, result types and logging
helpers used by the tree and delta layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    DeltaConfig,
    EmissionPolicy,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import DeltaStatistics

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "DeltaConfig",
    "EmissionPolicy",
    "CorrelationLogger",
    "get_logger",
    "DeltaStatistics",
]
