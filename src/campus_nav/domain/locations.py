# campus_nav/domain/locations.py
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from campus_nav.domain.entities.geography import Coord, Node, NodeId


@dataclass(frozen=True)
class NamedLocation:
    """All nodes sharing one trimmed display name (e.g. several building entrances)."""

    name: str
    nodes: tuple[Node, ...]

    @property
    def node_ids(self) -> tuple[NodeId, ...]:
        return tuple(n.id for n in self.nodes)

    @property
    def center(self) -> Coord:
        pts = np.array([(n.coord.lat, n.coord.lng) for n in self.nodes], dtype=float)
        lat, lng = pts.mean(axis=0)
        return Coord(float(lat), float(lng))


class LocationIndex:
    def __init__(self, locations: Iterable[NamedLocation] = ()):
        self._by_name: dict[str, NamedLocation] = {loc.name: loc for loc in locations}

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node]) -> LocationIndex:
        groups: dict[str, list[Node]] = {}
        for n in nodes:
            if n.label:
                groups.setdefault(n.label, []).append(n)
        return cls(NamedLocation(name, tuple(ns)) for name, ns in groups.items())

    def get(self, name: str | None) -> NamedLocation | None:
        if not name:
            return None
        return self._by_name.get(name.strip())

    def node_ids(self, name: str | None) -> tuple[NodeId, ...]:
        loc = self.get(name)
        return loc.node_ids if loc else ()

    def names(self) -> list[str]:
        return list(self._by_name)

    def __iter__(self) -> Iterator[NamedLocation]:
        return iter(self._by_name.values())

    def __contains__(self, name) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._by_name)
