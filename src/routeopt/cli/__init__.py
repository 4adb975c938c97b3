"""routeopt CLI — optimise an OpenAPI spec into a wildcard routing table.

Entry point registered as ``routeopt`` in ``pyproject.toml``::

    [project.scripts]
    routeopt = "routeopt.cli:main"
"""

import argparse


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routeopt`` command."""
    parser = argparse.ArgumentParser(
        prog="routeopt",
        description="Collapse OpenAPI path bindings into a minimal wildcard routing table.",
    )
    parser.add_argument(
        "-s",
        "--spec",
        default="openapi.yaml",
        help="Path to the openapi file (default: openapi.yaml)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Emit debug logs on stderr",
    )
    parser.add_argument(
        "--filter",
        default="",
        help="Filter operation tags using a regular expression. Runs before find and replace",
    )
    parser.add_argument(
        "--find",
        default="",
        help="Find sub-strings by regular expression to select for replacement",
    )
    parser.add_argument(
        "--replace",
        default="",
        help="Replace found sub-strings with the given string. Supports $1 / ${name} capture groups",
    )
    parser.add_argument(
        "-t",
        "--template",
        default=None,
        help="Path to a kida template file to format the output",
    )

    args = parser.parse_args(argv)

    from routeopt.cli._run import run_optimiser

    run_optimiser(args)
