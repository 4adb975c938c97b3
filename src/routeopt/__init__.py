"""routeopt — collapse OpenAPI path bindings into a minimal routing table.

Every path in an OpenAPI document is bound to one backend service through
its operation tags. routeopt aggregates those bindings into the fewest
single-segment wildcard rules that still route every path correctly.

Basic usage::

    from routeopt import Optimiser, OptimiserConfig

    Optimiser(OptimiserConfig(spec_file="openapi.yaml")).run()

Already-resolved bindings::

    from routeopt import optimise

    optimise({"/a/{id}": "X", "/a/{id}/sub": "X", "/b": "Y"})
    # [("/b", "Y"), ("/a/*", "X")]
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Optimiser",
    "OptimiserConfig",
    "Payload",
    "Route",
    "RouteOptError",
    "RouteTrie",
    "optimise",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routeopt`` fast while providing a clean top-level API.
    """
    if name in ("Optimiser", "optimise"):
        from routeopt import app as _app

        return getattr(_app, name)

    if name == "OptimiserConfig":
        from routeopt.config import OptimiserConfig

        return OptimiserConfig

    if name in ("Payload", "Route"):
        from routeopt import templating as _tmpl

        return getattr(_tmpl, name)

    if name == "RouteTrie":
        from routeopt.routing.trie import RouteTrie

        return RouteTrie

    if name == "RouteOptError":
        from routeopt.errors import RouteOptError

        return RouteOptError

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
