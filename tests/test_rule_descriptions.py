from openapi_lint.linter.rules.descriptions import OperationDescriptionRule
from openapi_lint.parser.base import Document


def _check(paths):
    return OperationDescriptionRule().check(Document.model_validate({"paths": paths}))


class TestOperationDescriptionRule:
    def test_missing_description(self):
        violations = _check({"/users": {"get": {"responses": {"200": {}}}}})
        assert len(violations) == 1
        assert violations[0].code == "MISSING_OPERATION_DESCRIPTION"
        assert violations[0].location == "GET /users"

    def test_blank_description(self):
        violations = _check({"/users": {"delete": {"description": "  \t\n"}}})
        assert [v.location for v in violations] == ["DELETE /users"]

    def test_empty_description(self):
        assert len(_check({"/users": {"put": {"description": ""}}})) == 1

    def test_non_blank_description(self):
        assert _check({"/users": {"get": {"description": "Returns all users"}}}) == []

    def test_one_violation_per_operation(self):
        violations = _check({
            "/users": {"get": {}, "post": {"description": "Create"}, "patch": {}},
            "/groups": {"head": {}},
        })
        assert [v.location for v in violations] == ["GET /users", "PATCH /users", "HEAD /groups"]

    def test_null_path_item_skipped(self):
        assert _check({"/users": None}) == []
