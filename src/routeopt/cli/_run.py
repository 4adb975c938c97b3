"""Run the optimiser from parsed CLI arguments.

Builds an ``OptimiserConfig`` from the flags, wires logging to stderr,
and turns any ``RouteOptError`` into an ``ERROR:`` line and exit code 1.
"""

import argparse
import logging
import sys

from routeopt.app import Optimiser
from routeopt.config import OptimiserConfig
from routeopt.errors import DuplicateBinding, RouteOptError


def configure_logging(debug: bool) -> None:
    """Send ``routeopt`` log records to stderr; DEBUG and up when *debug*."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    log = logging.getLogger("routeopt")
    log.handlers[:] = [handler]
    log.setLevel(logging.DEBUG if debug else logging.WARNING)


def run_optimiser(args: argparse.Namespace) -> None:
    """Optimise ``args.spec`` and print the rendered table to stdout.

    Raises ``SystemExit(1)`` on any optimiser error.
    """
    config = OptimiserConfig(
        spec_file=args.spec,
        debug=args.debug,
        filter=args.filter,
        find=args.find,
        replace=args.replace,
        template=args.template,
    )
    configure_logging(config.debug)

    try:
        config.validate()
        Optimiser(config).run(sys.stdout)
    except DuplicateBinding as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        print(
            "ERROR: two spec paths normalize to the same route; "
            "check for paths that differ only in variable names",
            file=sys.stderr,
        )
        raise SystemExit(1) from exc
    except RouteOptError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
