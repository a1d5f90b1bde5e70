"""Base pydantic model for centralized configuration of schema definitions."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model for centralized configuration of contract schemas.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    wire keys are ignored so older consumers tolerate newer producers.
    Strings are kept verbatim: whitespace is significant to the contract
    rules and is checked by the validator, not silently stripped here.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
