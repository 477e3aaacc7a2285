"""Render violation lists for the terminal, machines and CI."""

import json

from openapi_lint.linter.violation import Violation


def format_text(violations: list[Violation]) -> str:
    if not violations:
        return "OpenAPI validation passed."
    lines = ["OpenAPI validation failed:"]
    lines.extend(f"  - {v}" for v in violations)
    return "\n".join(lines)


def format_json(violations: list[Violation]) -> str:
    return json.dumps(
        {
            "passed": not violations,
            "count": len(violations),
            "violations": [v.to_dict() for v in violations],
        },
        indent=2,
    )


def format_github(violations: list[Violation]) -> str:
    """One GitHub Actions ``::error`` workflow command per violation."""
    return "\n".join(
        f"::error title={v.code}::{_escape(f'{v.location}: {v.message}')}" for v in violations
    )


def format_summary(violations: list[Violation], source: str) -> str:
    """Markdown block suitable for a CI run summary."""
    status = "passed" if not violations else f"failed with {len(violations)} violation(s)"
    lines = [f"## OpenAPI lint: `{source}`", "", f"Validation {status}."]
    if violations:
        lines += ["", "| Code | Location | Message |", "|------|----------|---------|"]
        for v in violations:
            lines.append(f"| `{v.code}` | {_cell(v.location)} | {_cell(v.message)} |")
    return "\n".join(lines) + "\n"


def _escape(text: str) -> str:
    # workflow command data escaping
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _cell(text: str) -> str:
    return " ".join(text.splitlines()).replace("|", "\\|")
