"""
Tests for project identifier resolution.
"""

import pytest

from core.errors import InvalidArgumentError
from core.identifiers import ProjectID, parse_id, path_escape, resource_id, to_project_id


class TestParseId:
    def test_numeric_id(self):
        assert parse_id(42) == "42"

    def test_numeric_string(self):
        assert parse_id("42") == "42"

    def test_namespaced_path_is_escaped(self):
        assert parse_id("group/project") == "group%2Fproject"

    def test_nested_groups(self):
        assert parse_id("group/sub group/project") == "group%2Fsub%20group%2Fproject"

    def test_unicode_path(self):
        assert parse_id("grüppe/projekt") == "gr%C3%BCppe%2Fprojekt"

    def test_project_id_passthrough(self):
        assert parse_id(ProjectID.path("a/b")) == "a%2Fb"
        assert parse_id(ProjectID.numeric(7)) == "7"

    @pytest.mark.parametrize("value", [None, 4.2, ["a"], {"id": 1}, b"group/project", True])
    def test_rejects_other_types(self, value):
        with pytest.raises(InvalidArgumentError):
            parse_id(value)

    @pytest.mark.parametrize("value", [0, -3])
    def test_rejects_non_positive_ids(self, value):
        with pytest.raises(InvalidArgumentError):
            parse_id(value)

    def test_rejects_empty_path(self):
        with pytest.raises(InvalidArgumentError):
            parse_id("")


class TestProjectID:
    def test_to_project_id_tags_kind(self):
        assert to_project_id(5).kind == ProjectID.NUMERIC
        assert to_project_id("a/b").kind == ProjectID.PATH

    def test_equality_and_hash(self):
        assert ProjectID.numeric(1) == ProjectID.numeric(1)
        assert ProjectID.numeric(1) != ProjectID.path("1")
        assert len({ProjectID.path("a"), ProjectID.path("a")}) == 1

    def test_unknown_kind(self):
        with pytest.raises(InvalidArgumentError):
            ProjectID("uuid", "abc")

    def test_numeric_rejects_string(self):
        with pytest.raises(InvalidArgumentError):
            ProjectID.numeric("5")


def test_path_escape_keeps_unreserved():
    assert path_escape("my-project_1.0~x") == "my-project_1.0~x"


class TestResourceId:
    def test_accepts_int(self):
        assert resource_id(7) == 7

    @pytest.mark.parametrize("value", ["7", 7.0, None, False])
    def test_rejects_non_int(self, value):
        with pytest.raises(InvalidArgumentError):
            resource_id(value, "merge request IID")
