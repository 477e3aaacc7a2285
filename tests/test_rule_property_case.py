import pytest

from openapi_lint.linter.rules.property_case import PropertyNameCaseRule, is_lower_camel_case
from openapi_lint.parser.base import Document


def _check(schemas):
    return PropertyNameCaseRule().check(Document.model_validate({"components": {"schemas": schemas}}))


class TestIsLowerCamelCase:
    @pytest.mark.parametrize("name", ["firstName", "id", "x1", "petId2Name"])
    def test_valid(self, name):
        assert is_lower_camel_case(name)

    @pytest.mark.parametrize("name", ["First_name", "first_name", "1stName", "FirstName", "", "first-name", "namé"])
    def test_invalid(self, name):
        assert not is_lower_camel_case(name)


class TestPropertyNameCaseRule:
    def test_flags_bad_property(self):
        violations = _check({
            "User": {"type": "object", "properties": {"firstName": {}, "First_name": {}}},
        })
        assert len(violations) == 1
        assert violations[0].code == "INVALID_PROPERTY_NAME_CASE"
        assert violations[0].location == "schema User.properties.First_name"
        assert violations[0].message == "Property name must be lowerCamelCase"

    def test_declaration_order(self):
        violations = _check({
            "User": {"properties": {"last_name": {}, "Age": {}}},
            "Group": {"properties": {"group_id": {}}},
        })
        assert [v.location for v in violations] == [
            "schema User.properties.last_name",
            "schema User.properties.Age",
            "schema Group.properties.group_id",
        ]

    def test_nested_properties_not_checked(self):
        violations = _check({
            "User": {"properties": {"address": {"properties": {"zip_code": {}}}}},
        })
        assert violations == []

    def test_schema_without_properties(self):
        assert _check({"Color": {"type": "string", "enum": ["RED"]}, "Empty": None}) == []

    def test_null_property_name_skipped(self):
        doc = Document.model_validate({"components": {"schemas": {"User": {"properties": {None: {}, "ok": {}}}}}})
        assert PropertyNameCaseRule().check(doc) == []

    def test_boolean_schemas(self):
        violations = _check({
            "Anything": True,
            "User": {"properties": {"first_name": True, "extra": False}},
        })
        assert [v.location for v in violations] == ["schema User.properties.first_name"]
