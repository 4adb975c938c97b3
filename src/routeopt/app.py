"""The optimiser pipeline.

Resolves every path in an OpenAPI document to a service, inserts the
normalized paths into a route trie, prunes it, and walks it into a
``Payload`` ready for rendering. Any error aborts the whole run.
"""

import logging
import sys
from collections.abc import Mapping
from typing import TextIO

from routeopt.binding import TagRewriter, resolve_path_binding
from routeopt.config import OptimiserConfig
from routeopt.openapi import Spec, load_spec
from routeopt.routing import RouteTrie, normalize_path
from routeopt.templating import Payload, render

logger = logging.getLogger("routeopt.app")


def optimise(bindings: Mapping[str, str]) -> list[tuple[str, str]]:
    """Optimise already-resolved ``{path: service}`` bindings.

    Paths may still contain ``{variable}`` segments. Returns the pruned
    table in walk order.
    """
    trie = RouteTrie()
    for path, service in bindings.items():
        trie.insert(normalize_path(path), service)
    trie.prune()
    return list(trie.walk())


class Optimiser:
    """Builds and renders the optimised routing table for one spec.

    Usage::

        optimiser = Optimiser(OptimiserConfig(spec_file="openapi.yaml"))
        optimiser.run()

    Constructing the optimiser compiles the tag filter and find patterns,
    so invalid expressions fail before any file is read.
    """

    __slots__ = ("_rewriter", "config")

    def __init__(self, config: OptimiserConfig | None = None) -> None:
        self.config = config or OptimiserConfig()
        self._rewriter = TagRewriter(self.config.filter, self.config.find, self.config.replace)

    def build(self, spec: Spec) -> Payload:
        """Resolve, insert, prune and walk *spec* into a ``Payload``."""
        trie = RouteTrie()

        logger.debug("processing the openapi spec...")
        for path, path_item in spec.paths.items():
            service = resolve_path_binding(path, path_item, self._rewriter)
            if service is None:
                logger.debug("skipping path %r with no operations", path)
                continue

            normalized = normalize_path(path)
            logger.debug("rewriting path %r -> %r", path, normalized)
            logger.debug("adding path %r to route optimiser", normalized)
            trie.insert(normalized, service)

        logger.debug("optimising routes...")
        trie.prune()

        logger.debug("building the template payload...")
        return Payload.from_pairs(trie.walk())

    def run(self, out: TextIO | None = None) -> None:
        """Load the configured spec, optimise it, and write the rendered table."""
        spec = load_spec(self.config.spec_file)
        payload = self.build(spec)

        logger.debug("executing template...")
        text = render(payload, self.config.template)
        (out or sys.stdout).write(text)
