from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDto(BaseModel):
    """
    Base class of every DTO returned by the API.

    Fields are declared in snake_case and serialized in camelCase, which is
    what `jsonable_encoder` emits inside the response envelope. Instances can
    also be built directly from ORM entities.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
