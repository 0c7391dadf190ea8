from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseRequestDto(BaseModel):
    """
    Base class of API request bodies.

    Bodies are sent in camelCase. Unknown keys are rejected and surrounding
    whitespace is stripped from every string.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    def submitted_fields(self) -> dict:
        """Fields explicitly present in the body, keyed by their Python names."""
        return self.model_dump(by_alias=False, exclude_unset=True)
