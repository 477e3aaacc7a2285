"""Runs the lint rules over a document in a fixed order.

Output order is rule registration order, then each rule's discovery order
(paths and schemas as declared, methods in canonical HTTP order).
Downstream formatters may rely on it.
"""

import logging
from typing import Sequence

from openapi_lint.linter.rules.base import Rule
from openapi_lint.linter.rules.descriptions import OperationDescriptionRule
from openapi_lint.linter.rules.enum_case import EnumUpperSnakeCaseRule
from openapi_lint.linter.rules.id_params import GenericIdParameterRule
from openapi_lint.linter.rules.post_status import PostCreatedStatusRule
from openapi_lint.linter.rules.property_case import PropertyNameCaseRule
from openapi_lint.linter.violation import Violation
from openapi_lint.parser.base import Document

logger = logging.getLogger(__name__)

# New rules are appended; never reorder.
DEFAULT_RULES: tuple[Rule, ...] = (
    OperationDescriptionRule(),
    PropertyNameCaseRule(),
    PostCreatedStatusRule(),
    GenericIdParameterRule(),
    EnumUpperSnakeCaseRule(),
)


class Validator:
    """Applies a sequence of rules to documents."""

    def __init__(self, rules: Sequence[Rule] | None = None):
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)

    def validate(self, document: Document | None) -> list[Violation]:
        """Return every violation found, in rule order."""
        if document is None:
            return []

        violations: list[Violation] = []
        for rule in self.rules:
            found = rule.check(document)
            logger.debug("Rule %s reported %d violation(s)", rule.name, len(found))
            violations.extend(found)
        return violations


def validate(document: Document | None) -> list[Violation]:
    """Validate a document with the default rule set."""
    return Validator().validate(document)
