"""OpenAPI document loading.

Only the parts of the document the optimiser needs are kept: the path
table and, per verb, each operation's ``operationId`` and ``tags``.
"""

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from routeopt.errors import SpecLoadError

# Verbs in the order operations are resolved and reported
VERBS: tuple[str, ...] = ("get", "post", "put", "patch", "delete", "head", "options")


@dataclass(frozen=True, slots=True)
class Operation:
    """A single API operation."""

    operation_id: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PathItem:
    """The operations defined on one path, keyed by lower-case verb."""

    operations_by_verb: Mapping[str, Operation] = field(default_factory=dict)

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield ``(METHOD, operation)`` pairs in fixed verb order."""
        for verb in VERBS:
            operation = self.operations_by_verb.get(verb)
            if operation is not None:
                yield verb.upper(), operation


@dataclass(frozen=True, slots=True)
class Spec:
    """An OpenAPI document reduced to its path table."""

    paths: Mapping[str, PathItem] = field(default_factory=dict)


def load_spec(filename: str | Path) -> Spec:
    """Read and parse an OpenAPI document.

    Files ending in ``.json`` are decoded as JSON, everything else as YAML.

    Raises:
        SpecLoadError: If the file cannot be read, decoded, or has the
            wrong shape.
    """
    path = Path(filename)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecLoadError(str(path), getattr(exc, "strerror", None) or str(exc)) from exc

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SpecLoadError(str(path), str(exc)) from exc

    return parse_spec(data, source=str(path))


def parse_spec(data: Any, source: str = "<memory>") -> Spec:
    """Build a ``Spec`` from an already-decoded document."""
    if not isinstance(data, Mapping):
        raise SpecLoadError(source, "document is not a mapping")

    raw_paths = data.get("paths") or {}
    if not isinstance(raw_paths, Mapping):
        raise SpecLoadError(source, "'paths' is not a mapping")

    paths: dict[str, PathItem] = {}
    for raw_path, raw_item in raw_paths.items():
        path = str(raw_path)
        if raw_item is None:
            paths[path] = PathItem()
            continue
        if not isinstance(raw_item, Mapping):
            raise SpecLoadError(source, f"path item {path!r} is not a mapping")
        paths[path] = _parse_path_item(raw_item, path, source)

    return Spec(paths=paths)


def _parse_path_item(raw: Mapping[str, Any], path: str, source: str) -> PathItem:
    operations: dict[str, Operation] = {}
    for verb in VERBS:
        raw_op = raw.get(verb)
        if raw_op is None:
            continue
        if not isinstance(raw_op, Mapping):
            raise SpecLoadError(source, f"operation {verb.upper()} {path} is not a mapping")

        tags = raw_op.get("tags") or []
        if not isinstance(tags, list):
            raise SpecLoadError(source, f"tags of {verb.upper()} {path} is not a list")
        # Scalars such as YAML integers are accepted; null and nested values are not
        if not all(isinstance(tag, str | int | float) for tag in tags):
            raise SpecLoadError(source, f"tags of {verb.upper()} {path} must be strings")

        operations[verb] = Operation(
            operation_id=str(raw_op.get("operationId") or ""),
            tags=tuple(str(tag) for tag in tags),
        )
    return PathItem(operations_by_verb=operations)
