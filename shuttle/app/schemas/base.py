from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both spellings accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def require_text(value: str, message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value.strip()
