"""
Base Repository Interface Module

Defines the generic interface for data access, decoupling callers from the concrete store.
"""

from abc import ABC
from typing import Generic, TypeVar

from pydantic import BaseModel

# Define generic type variable
T = TypeVar("T", bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    """
    Base Repository Interface

    Parameterized by the entity type it stores.
    """
    pass
