"""Enum values of component schemas must be UPPER_SNAKE_CASE."""

import re
from typing import Any

from openapi_lint.linter.rules.base import property_location, schema_location
from openapi_lint.linter.violation import Violation, ViolationCode
from openapi_lint.parser.base import Document, Schema

UPPER_SNAKE = re.compile(r"[A-Z0-9]+(?:_[A-Z0-9]+)*")


def is_upper_snake_case(value: str) -> bool:
    return UPPER_SNAKE.fullmatch(value) is not None


class EnumUpperSnakeCaseRule:
    name = "enum-upper-snake-case"
    codes = (ViolationCode.ENUM_NOT_UPPER_SNAKE_CASE.value,)
    summary = "String enum values must be UPPER_SNAKE_CASE."

    def check(self, document: Document) -> list[Violation]:
        violations = []
        for schema_name, schema in document.components.schemas.items():
            if not isinstance(schema, Schema):
                continue
            violations.extend(_check_enum(schema.enum, schema_location(schema_name)))
            for prop_name, prop_schema in schema.properties.items():
                if prop_name is None or not isinstance(prop_schema, Schema):
                    continue
                violations.extend(
                    _check_enum(prop_schema.enum, property_location(schema_name, prop_name))
                )
        return violations


def _check_enum(values: list[Any], location: str) -> list[Violation]:
    # only string members are checked
    return [
        Violation(
            code=ViolationCode.ENUM_NOT_UPPER_SNAKE_CASE,
            location=location,
            message=f"Enum value '{value}' must use UPPER_SNAKE_CASE",
        )
        for value in values
        if isinstance(value, str) and not is_upper_snake_case(value)
    ]
