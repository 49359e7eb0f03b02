"""
Stored Entity Domain Model

Base class for records persisted through a typed store.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoredEntity(BaseModel):
    """
    Stored Entity Base Model

    Fields are written as camelCase JSON keys and may be populated either by
    their Python name or by that alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
