from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class Intersection:
    t: float
    object: Any


class IntersectionSet:
    """Unsorted, fixed-size collection of intersections produced by a single intersect call."""

    __slots__ = ("_intersections",)

    def __init__(self, intersections: Sequence[Intersection]) -> None:
        self._intersections: Tuple[Intersection, ...] = tuple(intersections)

    def __len__(self) -> int:
        return len(self._intersections)

    def __getitem__(self, index: int) -> Intersection:
        return self._intersections[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._intersections)

    def __repr__(self) -> str:
        return f"IntersectionSet({[intersection.t for intersection in self._intersections]})"

    def hit(self) -> Intersection | None:
        """
        Nearest intersection strictly in front of the ray origin.
        A t of exactly 0 is excluded; among equal minima the first one encountered is kept.
        """
        closest: Intersection | None = None
        for intersection in self._intersections:
            if intersection.t <= 0.0:
                continue
            if closest is None or intersection.t < closest.t:
                closest = intersection
        return closest
