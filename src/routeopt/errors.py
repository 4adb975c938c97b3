"""routeopt exception hierarchy.

Shared across the loader, resolver, trie, and renderer so every module
raises and the CLI catches the same types. Nothing in the package exits
the process; that decision belongs to ``routeopt.cli``.
"""

from dataclasses import dataclass
from typing import ClassVar


class RouteOptError(Exception):
    """Base for all routeopt-specific errors."""


class ConfigurationError(RouteOptError):
    """Raised when optimiser configuration is invalid.

    Typically raised by ``OptimiserConfig.validate()`` before a run starts.
    """


@dataclass(frozen=True, slots=True)
class SpecLoadError(RouteOptError):
    """The OpenAPI document could not be read or decoded."""

    source: str
    reason: str

    def __str__(self) -> str:
        return f"failed to load openapi spec file {self.source!r}, {self.reason}"


@dataclass(frozen=True, slots=True)
class PatternError(RouteOptError):
    """A user-supplied regular expression failed to compile."""

    kind: ClassVar[str] = "pattern"

    pattern: str
    reason: str

    def __str__(self) -> str:
        return f"failed to compile {self.kind} regex {self.pattern!r}, {self.reason}"


class InvalidFilterPattern(PatternError):  # noqa: N818
    """The ``--filter`` expression is not a valid regular expression."""

    kind = "filter"


class InvalidFindPattern(PatternError):  # noqa: N818
    """The ``--find`` expression is not a valid regular expression."""

    kind = "find"


class BindingError(RouteOptError):
    """An operation or path could not be bound to exactly one service."""


@dataclass(frozen=True, slots=True)
class UnboundOperation(BindingError):  # noqa: N818
    """No tag survived filtering for an operation."""

    operation_id: str
    method: str
    path: str

    def __str__(self) -> str:
        return (
            f"could not determine binding for operation {self.operation_id!r} "
            f"({self.method} {self.path})"
        )


@dataclass(frozen=True, slots=True)
class AmbiguousOperation(BindingError):  # noqa: N818
    """More than one tag survived filtering for an operation."""

    operation_id: str
    method: str
    path: str
    candidates: tuple[str, ...]

    def __str__(self) -> str:
        return (
            f"found multiple bindings ({','.join(self.candidates)!r}) for operation "
            f"{self.operation_id!r} ({self.method} {self.path})"
        )


@dataclass(frozen=True, slots=True)
class ConflictingVerbBinding(BindingError):  # noqa: N818
    """Two verbs on one path resolved to different services.

    Routing is per path, not per verb, so every verb on a path must agree.
    """

    path: str
    first_method: str
    first_service: str
    second_method: str
    second_service: str

    def __str__(self) -> str:
        return (
            f"found multiple bindings for path {self.path!r}: "
            f"{self.first_method} -> {self.first_service}, "
            f"{self.second_method} -> {self.second_service}"
        )


@dataclass(frozen=True, slots=True)
class DuplicateBinding(RouteOptError):  # noqa: N818
    """A trie node was bound twice.

    Reachable when two templated paths differ only in variable names
    (``/users/{id}`` and ``/users/{name}``), which OpenAPI forbids.
    """

    path: str
    existing: str
    service: str

    def __str__(self) -> str:
        return (
            f"path {self.path!r} already bound to {self.existing!r}, "
            f"cannot bind {self.service!r}"
        )


@dataclass(frozen=True, slots=True)
class TemplateRenderError(RouteOptError):
    """The output template could not be loaded or rendered."""

    template: str
    reason: str

    def __str__(self) -> str:
        return f"failed to render template {self.template!r}, {self.reason}"
