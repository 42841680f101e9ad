"""Protocol definitions for pluggable components in routekit."""

from typing import Protocol, Sequence

from routekit.core_types import Coordinate, Point, Route


class RouteSequencer(Protocol):
    """Protocol for route sequencing heuristics.

    Implementations must return a permutation of ``points`` and include the leg
    from ``start`` to the first stop in the route distance.
    """

    def sequence(self, points: Sequence[Point], start: Coordinate) -> Route:
        """Order ``points`` into a visiting sequence starting from ``start``."""
        ...
