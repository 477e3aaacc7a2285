"""Every operation must carry a non-blank description."""

from openapi_lint.linter.rules.base import operation_location
from openapi_lint.linter.violation import Violation, ViolationCode
from openapi_lint.parser.base import Document


class OperationDescriptionRule:
    name = "operation-description"
    codes = (ViolationCode.MISSING_OPERATION_DESCRIPTION.value,)
    summary = "Every operation must have a non-blank description."

    def check(self, document: Document) -> list[Violation]:
        violations = []
        for path, path_item in document.paths.items():
            if path_item is None:
                continue
            for method, operation in path_item.operations():
                if operation.description and operation.description.strip():
                    continue
                violations.append(
                    Violation(
                        code=ViolationCode.MISSING_OPERATION_DESCRIPTION,
                        location=operation_location(method, path),
                        message="Operation must have a non-blank description",
                    )
                )
        return violations
