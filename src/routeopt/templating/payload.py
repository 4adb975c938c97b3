"""Route and Payload — the optimised table handed to templates."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Route:
    """One emitted routing rule."""

    path: str
    service: str


@dataclass(frozen=True, slots=True)
class Payload:
    """The ordered routing table, in trie walk order.

    Templates iterate it directly or use the two derived views.
    """

    routes: tuple[Route, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "Payload":
        return cls(tuple(Route(path=path, service=service) for path, service in pairs))

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    def services(self) -> dict[str, list[str]]:
        """Map each service to the paths it serves, in payload order."""
        result: dict[str, list[str]] = {}
        for route in self.routes:
            result.setdefault(route.service, []).append(route.path)
        return result

    def paths(self) -> dict[str, str]:
        """Map each path to its service; a repeated path keeps the last one."""
        return {route.path: route.service for route in self.routes}
