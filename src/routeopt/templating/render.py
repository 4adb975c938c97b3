"""Kida rendering of the optimised routing table.

The payload is rendered either through the built-in table template or
through a user template file. Every template receives the same context:

- ``routes``: ``Route`` records in trie walk order
- ``table``: ``Route`` records sorted by path, one per path
- ``services``: service name -> list of paths
- ``paths``: path -> service name
"""

from pathlib import Path
from typing import Any

from kida import Environment, FileSystemLoader
from kida.environment.exceptions import TemplateError, TemplateNotFoundError

from routeopt.errors import TemplateRenderError
from routeopt.templating.payload import Payload, Route

DEFAULT_TEMPLATE = "{% for route in table %}{{ route.path }} -> {{ route.service }}\n{% end %}"


def build_context(payload: Payload) -> dict[str, Any]:
    """Build the template context for *payload*."""
    paths = payload.paths()
    return {
        "routes": list(payload),
        "table": [Route(path=path, service=paths[path]) for path in sorted(paths)],
        "services": payload.services(),
        "paths": paths,
    }


def render(payload: Payload, template: str | Path | None = None) -> str:
    """Render *payload* through *template*, or the built-in table if ``None``.

    Raises ``TemplateRenderError`` if the template cannot be loaded,
    parsed, or rendered.
    """
    name = "<default>" if template is None else str(template)
    try:
        if template is None:
            env = Environment(autoescape=False)
            tpl = env.from_string(DEFAULT_TEMPLATE)
        else:
            path = Path(template)
            env = Environment(
                loader=FileSystemLoader(str(path.parent)),
                autoescape=False,
            )
            tpl = env.get_template(path.name)
        return tpl.render(build_context(payload))
    except (TemplateError, TemplateNotFoundError, OSError) as exc:
        raise TemplateRenderError(name, str(exc)) from exc
