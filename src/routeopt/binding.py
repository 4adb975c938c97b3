"""Tag-to-service binding resolution.

Each operation names its backend through its tags. A ``TagRewriter``
narrows the tags with an optional inclusion filter and rewrites them with
an optional find/replace, and the result must be exactly one service.
All verbs on one path must then agree on that service.
"""

import logging
import re
from collections.abc import Iterable

from routeopt.errors import (
    AmbiguousOperation,
    ConflictingVerbBinding,
    InvalidFilterPattern,
    InvalidFindPattern,
    PatternError,
    UnboundOperation,
)
from routeopt.openapi import Operation, PathItem

logger = logging.getLogger("routeopt.binding")

# $1, $name, ${1}, ${name} and $$ in replacement templates
_GROUP_REF = re.compile(r"\$(?:(\$)|\{([A-Za-z0-9_]+)\}|([A-Za-z0-9_]+))")


def _compile(pattern: str, error: type[PatternError]) -> re.Pattern[str] | None:
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise error(pattern, str(exc)) from exc


def expand_template(template: str, match: re.Match[str]) -> str:
    """Expand ``$``-style capture references in *template* for one match.

    ``$name`` takes the longest run of letters, digits and underscores as the
    group name; use ``${1}x`` to follow a group reference with a literal.
    References to missing or unmatched groups expand to the empty string.
    """

    def substitute(ref: re.Match[str]) -> str:
        if ref.group(1):
            return "$"
        name = ref.group(2) or ref.group(3)
        if name.isdigit():
            index = int(name)
            if index > match.re.groups:
                return ""
            return match.group(index) or ""
        return match.groupdict().get(name) or ""

    return _GROUP_REF.sub(substitute, template)


class TagRewriter:
    """Compiled filter and find/replace rules for operation tags.

    Usage::

        rewriter = TagRewriter(filter="^svc-", find="svc-(.+)", replace="$1")
        rewriter(["svc-users", "public"])  # ["users"]

    Raises ``InvalidFilterPattern`` or ``InvalidFindPattern`` on construction
    if either expression does not compile.
    """

    __slots__ = ("_filter", "_find", "_replace")

    def __init__(self, filter: str = "", find: str = "", replace: str = "") -> None:  # noqa: A002
        self._filter = _compile(filter, InvalidFilterPattern)
        self._find = _compile(find, InvalidFindPattern)
        self._replace = replace

    def __call__(self, tags: Iterable[str]) -> list[str]:
        """Return the surviving tags, rewritten, in their original order."""
        result = list(tags)

        if self._filter is not None:
            result = [tag for tag in result if self._filter.search(tag)]

        if self._find is not None:
            find, replace = self._find, self._replace
            result = [find.sub(lambda m: expand_template(replace, m), tag) for tag in result]

        return result


def process_tags(tags: Iterable[str], filter: str, find: str, replace: str) -> list[str]:  # noqa: A002
    """One-shot form of ``TagRewriter(filter, find, replace)(tags)``."""
    return TagRewriter(filter, find, replace)(tags)


def resolve_binding(operation: Operation, method: str, path: str, rewriter: TagRewriter) -> str:
    """Resolve the single service an operation binds to.

    Raises:
        UnboundOperation: If no tag survives the rewriter.
        AmbiguousOperation: If more than one tag survives.
    """
    services = rewriter(operation.tags)

    if not services:
        raise UnboundOperation(operation.operation_id, method, path)
    if len(services) > 1:
        raise AmbiguousOperation(operation.operation_id, method, path, tuple(services))

    logger.debug("found binding %r for operation %r", services[0], operation.operation_id)
    return services[0]


def resolve_path_binding(path: str, path_item: PathItem, rewriter: TagRewriter) -> str | None:
    """Resolve the service for every verb on *path* and check they agree.

    Returns ``None`` when the path defines no operations.

    Raises ``ConflictingVerbBinding`` when two verbs resolve to different
    services, in addition to anything ``resolve_binding`` raises.
    """
    # TODO: support per-verb bindings once the output table can carry a method column.
    first: tuple[str, str] | None = None

    for method, operation in path_item.operations():
        logger.debug("processing %s %s %r", method, path, operation.operation_id)
        service = resolve_binding(operation, method, path, rewriter)

        if first is None:
            first = (method, service)
        elif service != first[1]:
            raise ConflictingVerbBinding(path, first[0], first[1], method, service)

    return None if first is None else first[1]
