"""Tests for routeopt.openapi — document loading and parsing."""

import json
from pathlib import Path

import pytest

from routeopt.errors import SpecLoadError
from routeopt.openapi import Operation, PathItem, load_spec, parse_spec

YAML_SPEC = """\
openapi: 3.0.0
info:
  title: Example
  version: "1.0"
paths:
  /users:
    get:
      operationId: listUsers
      tags: [users]
    post:
      operationId: createUser
      tags: [users]
  /users/{id}:
    parameters:
      - name: id
        in: path
    get:
      operationId: getUser
      tags:
        - users
        - public
"""


class TestParseSpec:
    def test_operations(self) -> None:
        spec = parse_spec(
            {
                "paths": {
                    "/users": {
                        "get": {"operationId": "listUsers", "tags": ["users"]},
                    }
                }
            }
        )
        item = spec.paths["/users"]
        assert list(item.operations()) == [("GET", Operation("listUsers", ("users",)))]

    def test_verb_order(self) -> None:
        raw = {verb: {"operationId": verb} for verb in ("options", "delete", "get", "post")}
        spec = parse_spec({"paths": {"/x": raw}})
        methods = [method for method, _ in spec.paths["/x"].operations()]
        assert methods == ["GET", "POST", "DELETE", "OPTIONS"]

    def test_non_operation_keys_ignored(self) -> None:
        spec = parse_spec({"paths": {"/x": {"summary": "s", "parameters": [], "trace": {}}}})
        assert list(spec.paths["/x"].operations()) == []

    def test_defaults(self) -> None:
        spec = parse_spec({"paths": {"/x": {"get": {}}}})
        ((_, op),) = spec.paths["/x"].operations()
        assert op.operation_id == ""
        assert op.tags == ()

    def test_missing_paths(self) -> None:
        assert parse_spec({"openapi": "3.0.0"}).paths == {}

    def test_null_path_item(self) -> None:
        spec = parse_spec({"paths": {"/x": None}})
        assert spec.paths["/x"] == PathItem()

    def test_document_order_kept(self) -> None:
        spec = parse_spec({"paths": {"/b": {}, "/a": {}, "/c": {}}})
        assert list(spec.paths) == ["/b", "/a", "/c"]

    def test_tags_coerced_to_str(self) -> None:
        spec = parse_spec({"paths": {"/x": {"get": {"tags": [2024]}}}})
        ((_, op),) = spec.paths["/x"].operations()
        assert op.tags == ("2024",)

    @pytest.mark.parametrize(
        "data",
        [
            ["not", "a", "mapping"],
            {"paths": ["/x"]},
            {"paths": {"/x": "nope"}},
            {"paths": {"/x": {"get": "nope"}}},
            {"paths": {"/x": {"get": {"tags": "users"}}}},
            {"paths": {"/x": {"get": {"tags": [None]}}}},
            {"paths": {"/x": {"get": {"tags": [{"name": "users"}]}}}},
            {"paths": {"/x": {"get": {"tags": [["users"]]}}}},
        ],
    )
    def test_bad_shape(self, data: object) -> None:
        with pytest.raises(SpecLoadError):
            parse_spec(data, source="bad.yaml")


class TestLoadSpec:
    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "openapi.yaml"
        path.write_text(YAML_SPEC)

        spec = load_spec(path)
        assert list(spec.paths) == ["/users", "/users/{id}"]
        ((method, op),) = spec.paths["/users/{id}"].operations()
        assert method == "GET"
        assert op.tags == ("users", "public")

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "openapi.json"
        path.write_text(
            json.dumps({"paths": {"/a": {"get": {"operationId": "a", "tags": ["A"]}}}})
        )

        spec = load_spec(str(path))
        assert spec.paths["/a"].operations_by_verb["get"] == Operation("a", ("A",))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SpecLoadError) as exc_info:
            load_spec(tmp_path / "missing.yaml")
        assert "missing.yaml" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("paths: [unclosed\n")
        with pytest.raises(SpecLoadError):
            load_spec(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{")
        with pytest.raises(SpecLoadError):
            load_spec(path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"paths:\n  /a\xff:\n    get: {tags: [A]}\n")
        with pytest.raises(SpecLoadError) as exc_info:
            load_spec(path)
        assert "latin1.yaml" in str(exc_info.value)
        assert "utf-8" in str(exc_info.value)
