"""Shared fixtures for routeopt tests."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_routeopt_logger() -> Iterator[None]:
    """Undo handlers and levels the CLI installs on the ``routeopt`` logger."""
    log = logging.getLogger("routeopt")
    handlers, level = log.handlers[:], log.level
    yield
    log.handlers[:] = handlers
    log.setLevel(level)
