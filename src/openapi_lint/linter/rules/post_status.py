"""POST operations must declare a 201 Created response."""

from openapi_lint.linter.rules.base import operation_location
from openapi_lint.linter.violation import Violation, ViolationCode
from openapi_lint.parser.base import Document


class PostCreatedStatusRule:
    name = "post-created-status"
    codes = (
        ViolationCode.POST_MISSING_RESPONSES.value,
        ViolationCode.POST_SHOULD_RETURN_201.value,
    )
    summary = "POST operations must declare responses including 201 Created."

    def check(self, document: Document) -> list[Violation]:
        violations = []
        for path, path_item in document.paths.items():
            if path_item is None or path_item.post is None:
                continue
            responses = path_item.post.responses
            location = operation_location("POST", path)

            if not responses:
                # No responses at all: the 201 check would only repeat this
                violations.append(
                    Violation(
                        code=ViolationCode.POST_MISSING_RESPONSES,
                        location=location,
                        message="POST operation must define a 201 Created response",
                    )
                )
            elif "201" not in responses:
                violations.append(
                    Violation(
                        code=ViolationCode.POST_SHOULD_RETURN_201,
                        location=location,
                        message="POST endpoints must return 201 Created instead of 200 OK",
                    )
                )
        return violations
