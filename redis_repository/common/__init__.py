"""
Common Utilities Module Initialization
"""

from redis_repository.common.errors import (
    AppError,
    ConfigurationError,
    InvalidArgumentError,
    StoreUnavailableError,
)

__all__ = [
    "AppError",
    "ConfigurationError",
    "InvalidArgumentError",
    "StoreUnavailableError",
]
