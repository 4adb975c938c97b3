"""Optimiser configuration.

OptimiserConfig is a frozen dataclass — immutable after creation, built once
from CLI flags (or directly in code) and passed through the whole run.
"""

from dataclasses import dataclass
from pathlib import Path

from routeopt.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class OptimiserConfig:
    """Optimiser configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = OptimiserConfig(spec_file="api.yaml", find="svc-(.+)", replace="$1")
    """

    # Input
    spec_file: str | Path = "openapi.yaml"

    # Logging
    debug: bool = False

    # Tag resolution (applied in order: filter, then find/replace)
    filter: str = ""  # Keep only tags matching this regex
    find: str = ""  # Regex selecting sub-strings to rewrite
    replace: str = ""  # Replacement, supports $1 / ${name} capture references

    # Output
    template: str | Path | None = None  # None renders the built-in table

    def validate(self) -> None:
        """Check that referenced files exist.

        Raises ``ConfigurationError`` describing the first problem found.
        """
        if not str(self.spec_file):
            msg = "spec_file is required"
            raise ConfigurationError(msg)
        if not Path(self.spec_file).is_file():
            msg = f"spec file {str(self.spec_file)!r} does not exist or is not a file"
            raise ConfigurationError(msg)
        if self.template is not None and not Path(self.template).is_file():
            msg = f"template {str(self.template)!r} does not exist or is not a file"
            raise ConfigurationError(msg)
