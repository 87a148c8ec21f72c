from collections.abc import Hashable
from dataclasses import dataclass

NodeId = Hashable  # str or int in practice
Path = tuple[NodeId, ...]


# Core graph types used by routing
@dataclass(frozen=True)
class Coord:
    lat: float
    lng: float


@dataclass(frozen=True)
class Node:
    id: NodeId
    name: str = ""
    coord: Coord = Coord(0.0, 0.0)

    @property
    def label(self) -> str:
        return self.name.strip()


@dataclass(frozen=True)
class Edge:
    source: NodeId
    target: NodeId
    weight: float = 1.0
    accessible: bool = False  # wheelchair-usable
