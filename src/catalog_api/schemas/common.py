"""Shared schema base and the error envelope."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Both spellings are accepted on input."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class ErrorResponse(CamelModel):
    """Body returned for every handled error."""

    error_code: str
    message: str
    details: list[str] | None = None
    trace_id: str = ""
