"""Violation record produced by every lint rule."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ViolationCode(str, Enum):
    """Closed set of codes consumers may rely on."""

    MISSING_OPERATION_DESCRIPTION = "MISSING_OPERATION_DESCRIPTION"
    INVALID_PROPERTY_NAME_CASE = "INVALID_PROPERTY_NAME_CASE"
    POST_MISSING_RESPONSES = "POST_MISSING_RESPONSES"
    POST_SHOULD_RETURN_201 = "POST_SHOULD_RETURN_201"
    GENERIC_ID_PARAMETER_NAME = "GENERIC_ID_PARAMETER_NAME"
    ENUM_NOT_UPPER_SNAKE_CASE = "ENUM_NOT_UPPER_SNAKE_CASE"


class Violation(BaseModel):
    """A single rule failure.

    ``location`` is a human-readable pointer such as ``GET /users`` or
    ``schema User.properties.lastName``.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    code: ViolationCode
    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.code} at {self.location}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        return self.model_dump()
