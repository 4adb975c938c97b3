"""Routing — path normalization and the wildcard-pruning route trie.

Paths are normalized, inserted into a ``RouteTrie``, pruned once, and
walked to produce the final routing table.
"""

from routeopt.routing.normalize import WILDCARD, normalize_path
from routeopt.routing.trie import RouteTrie, TrieNode

__all__ = ["WILDCARD", "RouteTrie", "TrieNode", "normalize_path"]
