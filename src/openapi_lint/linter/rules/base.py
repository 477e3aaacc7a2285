"""Rule protocol and the location strings shared by the rules."""

from typing import Protocol

from openapi_lint.linter.violation import Violation
from openapi_lint.parser.base import Document


class Rule(Protocol):
    """A single convention check over a whole document."""

    name: str
    codes: tuple[str, ...]
    summary: str

    def check(self, document: Document) -> list[Violation]:
        """Return violations in document declaration order."""


def operation_location(method: str, path: str) -> str:
    return f"{method} {path}"


def schema_location(schema_name: str) -> str:
    return f"schema {schema_name}"


def property_location(schema_name: str, property_name: str) -> str:
    return f"schema {schema_name}.properties.{property_name}"


def parameter_location(path: str, name: str, location: str, method: str | None = None) -> str:
    """Location of a parameter; path-level parameters have no method prefix."""
    prefix = path if method is None else operation_location(method, path)
    return f"{prefix} param '{name}' in {location}"
