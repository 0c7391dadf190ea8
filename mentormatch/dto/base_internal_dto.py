from pydantic import BaseModel, ConfigDict


class BaseInternalDTO(BaseModel):
    """Immutable value passed between controllers and services; never serialized."""

    model_config = ConfigDict(frozen=True, from_attributes=True)
