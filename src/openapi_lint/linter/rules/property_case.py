"""Component schema property names must be lowerCamelCase.

Only the top-level properties of each component schema are checked;
nested inline object schemas are left alone.
"""

import re

from openapi_lint.linter.rules.base import property_location
from openapi_lint.linter.violation import Violation, ViolationCode
from openapi_lint.parser.base import Document, Schema

LOWER_CAMEL = re.compile(r"[a-z][a-zA-Z0-9]*")


def is_lower_camel_case(name: str) -> bool:
    return LOWER_CAMEL.fullmatch(name) is not None


class PropertyNameCaseRule:
    name = "property-name-case"
    codes = (ViolationCode.INVALID_PROPERTY_NAME_CASE.value,)
    summary = "Component schema property names must be lowerCamelCase."

    def check(self, document: Document) -> list[Violation]:
        violations = []
        for schema_name, schema in document.components.schemas.items():
            if not isinstance(schema, Schema):
                continue
            for prop_name in schema.properties:
                if prop_name is None or is_lower_camel_case(prop_name):
                    continue
                violations.append(
                    Violation(
                        code=ViolationCode.INVALID_PROPERTY_NAME_CASE,
                        location=property_location(schema_name, prop_name),
                        message="Property name must be lowerCamelCase",
                    )
                )
        return violations
