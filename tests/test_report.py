import json

from openapi_lint.linter.violation import Violation
from openapi_lint.report import format_github, format_json, format_summary, format_text

VIOLATIONS = [
    Violation(code="MISSING_OPERATION_DESCRIPTION", location="GET /users", message="Operation must have a non-blank description"),
    Violation(code="INVALID_PROPERTY_NAME_CASE", location="schema User.properties.last_name", message="Property name must be lowerCamelCase"),
]


class TestFormatText:
    def test_passed(self):
        assert format_text([]) == "OpenAPI validation passed."

    def test_failed(self):
        lines = format_text(VIOLATIONS).splitlines()
        assert lines[0] == "OpenAPI validation failed:"
        assert lines[1] == "  - MISSING_OPERATION_DESCRIPTION at GET /users: Operation must have a non-blank description"
        assert len(lines) == 3


class TestFormatJson:
    def test_structure(self):
        data = json.loads(format_json(VIOLATIONS))
        assert data["passed"] is False
        assert data["count"] == 2
        assert data["violations"][1]["location"] == "schema User.properties.last_name"

    def test_empty(self):
        assert json.loads(format_json([])) == {"passed": True, "count": 0, "violations": []}


class TestFormatGithub:
    def test_annotations(self):
        lines = format_github(VIOLATIONS).splitlines()
        assert lines[0] == "::error title=MISSING_OPERATION_DESCRIPTION::GET /users: Operation must have a non-blank description"

    def test_escapes_newlines(self):
        v = Violation(code="ENUM_NOT_UPPER_SNAKE_CASE", location="schema A", message="Enum value 'a\nb' must use UPPER_SNAKE_CASE")
        assert "%0A" in format_github([v])


class TestFormatSummary:
    def test_passed(self):
        summary = format_summary([], "api.yaml")
        assert "## OpenAPI lint: `api.yaml`" in summary
        assert "Validation passed." in summary
        assert "|" not in summary

    def test_table(self):
        summary = format_summary(VIOLATIONS, "api.yaml")
        assert "failed with 2 violation(s)" in summary
        assert "| `INVALID_PROPERTY_NAME_CASE` | schema User.properties.last_name |" in summary

    def test_cells_escaped(self):
        v = Violation(code="ENUM_NOT_UPPER_SNAKE_CASE", location="schema A|B", message="Enum value 'a\nb' must use UPPER_SNAKE_CASE")
        row = format_summary([v], "api.yaml").splitlines()[-1]
        assert row == "| `ENUM_NOT_UPPER_SNAKE_CASE` | schema A\\|B | Enum value 'a b' must use UPPER_SNAKE_CASE |"
