"""Path template normalization.

OpenAPI path variables are rewritten into the single-segment wildcard the
route trie aggregates on::

    "/api/v1/users/{userId}/posts/{postId}" -> "/api/v1/users/*/posts/*"
"""

import re

WILDCARD = "*"

# One {name} variable; a name is letters, digits, underscores and hyphens
_VARIABLE = re.compile(r"\{[A-Za-z0-9_-]+\}")


def normalize_path(path: str) -> str:
    """Replace every ``{variable}`` in *path* with ``*``."""
    return _VARIABLE.sub(WILDCARD, path)
