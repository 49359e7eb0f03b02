"""
Entity Serialization

JSON codec used by typed stores to turn pydantic entities into stored records and back.
"""

from __future__ import annotations

from typing import Generic, Type, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class EntitySerializer(Generic[T]):
    """
    Entity JSON Serializer

    Writes compact JSON using field aliases (camelCase for ``StoredEntity``
    subclasses) and omits fields whose value is ``None``. Decoding accepts the
    same layout; fields missing from the payload fall back to model defaults.
    """

    def __init__(self, by_alias: bool = True, exclude_none: bool = True):
        self.by_alias = by_alias
        self.exclude_none = exclude_none

    def dumps(self, entity: T) -> str:
        """Serialize an entity to its stored JSON text."""
        return entity.model_dump_json(
            by_alias=self.by_alias,
            exclude_none=self.exclude_none,
        )

    def loads(self, model_type: Type[T], raw: Union[str, bytes]) -> T:
        """
        Deserialize stored JSON text into ``model_type``.

        Raises:
            pydantic.ValidationError: payload is malformed JSON or does not match the model.
                Typed stores treat any ValueError from here as a corrupt record.
        """
        return model_type.model_validate_json(raw)
