"""Templating — the routing table payload and its kida rendering."""

from routeopt.templating.payload import Payload, Route
from routeopt.templating.render import DEFAULT_TEMPLATE, render

__all__ = ["DEFAULT_TEMPLATE", "Payload", "Route", "render"]
