"""Route trie with wildcard pruning.

Normalized paths are inserted one segment per node and bound to a
service. ``prune()`` then collapses every subtree that only ever routes
to one service into a single ``*`` child, and ``walk()`` emits the
resulting table in a fixed order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from routeopt.errors import DuplicateBinding
from routeopt.routing.normalize import WILDCARD

logger = logging.getLogger("routeopt.routing")


def split_path(path: str) -> list[str]:
    """Split a path into segments, dropping one leading slash.

    Examples::

        "/users"      -> ["users"]
        "/users/*"    -> ["users", "*"]
        "/"           -> [""]
        "/users/"     -> ["users", ""]
    """
    return path.removeprefix("/").split("/")


class TrieNode:
    """A node in the route trie — one path segment."""

    __slots__ = ("children", "parent", "segment", "service")

    def __init__(self, segment: str = "", parent: TrieNode | None = None) -> None:
        self.segment = segment
        self.parent = parent
        # Child nodes keyed by segment, in insertion order
        self.children: dict[str, TrieNode] = {}
        # Service bound to exactly this path, if any
        self.service: str | None = None

    def __repr__(self) -> str:
        return f"TrieNode({self.path!r}, service={self.service!r}, children={len(self.children)})"

    def child(self, segment: str) -> TrieNode:
        """Return the child for *segment*, creating it if missing."""
        node = self.children.get(segment)
        if node is None:
            node = TrieNode(segment, self)
            self.children[segment] = node
        return node

    @property
    def path(self) -> str:
        """The ``/``-joined segments from the root to this node."""
        segments: list[str] = []
        node: TrieNode | None = self
        while node is not None and node.parent is not None:
            segments.append(node.segment)
            node = node.parent
        return "/" + "/".join(reversed(segments))


class RouteTrie:
    """Path-segment trie mapping normalized paths to services.

    Usage::

        trie = RouteTrie()
        trie.insert("/a/*", "X")
        trie.insert("/a/*/sub", "X")
        trie.insert("/b", "Y")
        trie.prune()
        list(trie.walk())  # [("/b", "Y"), ("/a/*", "X")]
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root = TrieNode()

    @property
    def root(self) -> TrieNode:
        return self._root

    def __str__(self) -> str:
        return "\n".join(f"{path} -> {service}" for path, service in self.walk())

    def descend(self, path: str) -> TrieNode:
        """Return the node for *path*, creating any missing nodes on the way."""
        node = self._root
        for segment in split_path(path):
            node = node.child(segment)
        return node

    def bind(self, node: TrieNode, service: str) -> None:
        """Bind *service* to *node*.

        Raises ``DuplicateBinding`` if the node is already bound, even to
        the same service.
        """
        if node.service is not None:
            raise DuplicateBinding(node.path, node.service, service)
        node.service = service

    @staticmethod
    def full_path(node: TrieNode) -> str:
        """Reconstruct the path of *node*; the root is ``/``."""
        return node.path

    def insert(self, path: str, service: str) -> TrieNode:
        """Descend to *path* and bind it to *service*."""
        node = self.descend(path)
        self.bind(node, service)
        return node

    def prune(self) -> None:
        """Collapse single-service subtrees into one ``*`` child, in place.

        Post-order: children are pruned first, then any node whose children
        (and all of their descendants) bind exactly one distinct service has
        those children replaced by a single wildcard bound to it. A node's
        own binding never takes part in its own check.
        """
        _prune(self._root)

    def walk(self) -> Iterator[tuple[str, str]]:
        """Yield ``(path, service)`` for every bound node.

        Children are visited in descending segment order before their
        parent's own binding is emitted.
        """
        yield from _walk(self._root)


def _prune(node: TrieNode) -> set[str]:
    """Prune below *node*; return every service bound in its subtree."""
    below: set[str] = set()
    for child in node.children.values():
        below |= _prune(child)

    if len(below) == 1:
        (service,) = below
        if not _is_collapsed(node, service):
            logger.debug("collapsing %s/* -> %s", node.path.rstrip("/"), service)
        node.children.clear()
        node.child(WILDCARD).service = service

    if node.service is not None:
        return below | {node.service}
    return below


def _is_collapsed(node: TrieNode, service: str) -> bool:
    if len(node.children) != 1:
        return False
    wildcard = node.children.get(WILDCARD)
    return wildcard is not None and wildcard.service == service and not wildcard.children


def _walk(node: TrieNode) -> Iterator[tuple[str, str]]:
    for child in sorted(node.children.values(), key=lambda n: n.segment, reverse=True):
        yield from _walk(child)

    if node.service is not None:
        yield node.path, node.service
