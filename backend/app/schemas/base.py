"""
Shared base for API/store records: snake_case attributes, camelCase JSON.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Records serialize with camelCase aliases and accept either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
