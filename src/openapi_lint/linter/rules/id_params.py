"""Identifier parameters must be qualified (``userId``, not ``id``)."""

from openapi_lint.linter.rules.base import parameter_location
from openapi_lint.linter.violation import Violation, ViolationCode
from openapi_lint.parser.base import Document, Parameter

CHECKED_LOCATIONS = ("path", "query")

MESSAGE = (
    "Path and query parameters representing identifiers must be specific, "
    "e.g. userId or resourceId instead of just 'id'"
)


def is_generic_id(param: Parameter) -> bool:
    """True for a path/query parameter named ``id`` in any case, ignoring surrounding whitespace."""
    if param.name is None or param.location not in CHECKED_LOCATIONS:
        return False
    return param.name.strip().lower() == "id"


class GenericIdParameterRule:
    name = "generic-id-parameter"
    codes = (ViolationCode.GENERIC_ID_PARAMETER_NAME.value,)
    summary = "Path and query parameters must not be named plain 'id'."

    def check(self, document: Document) -> list[Violation]:
        violations = []
        for path, path_item in document.paths.items():
            if path_item is None:
                continue
            violations.extend(self._check_parameters(path_item.parameters, path))
            for method, operation in path_item.operations():
                violations.extend(self._check_parameters(operation.parameters, path, method))
        return violations

    def _check_parameters(
        self, params: list[Parameter | None], path: str, method: str | None = None
    ) -> list[Violation]:
        return [
            Violation(
                code=ViolationCode.GENERIC_ID_PARAMETER_NAME,
                location=parameter_location(path, p.name, p.location, method),
                message=MESSAGE,
            )
            for p in params
            if p is not None and is_generic_id(p)
        ]
