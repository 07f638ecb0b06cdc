"""A directed graph of locations holding named objects."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TextIO

from carehub.linked_list import LinkedList, UniqueAttribute
from carehub.priority_queue import PriorityQueue


class LocationType(Enum):
    HOSPITAL = "Hospital"
    HOME = "Home"
    OTHER = "Other"


@dataclass
class MapObject(UniqueAttribute):
    """Something placed at a location, such as an ambulance."""

    name: str

    def uattr(self) -> str:
        return self.name


@dataclass
class Location:
    """A graph node: its kind and the objects currently there."""

    location_type: LocationType
    objects: LinkedList[MapObject] = field(default_factory=LinkedList)


@dataclass
class _State:
    cost: int
    position: str

    def __lt__(self, other: "_State") -> bool:
        return self.cost < other.cost

    def __gt__(self, other: "_State") -> bool:
        return self.cost > other.cost


class Graph:
    """Locations joined by directed, unweighted edges."""

    def __init__(self) -> None:
        self.nodes: dict[str, Location] = {}
        self.edges: dict[str, LinkedList[str]] = {}

    def add_node(self, node_id: str, location_type: LocationType) -> None:
        """Add (or replace) a location with no objects and no edges."""
        self.nodes[node_id] = Location(location_type)
        self.edges[node_id] = LinkedList()

    def add_edge(self, source: str, target: str) -> None:
        """Add an edge from ``source`` to ``target`` if ``source`` exists."""
        edges = self.edges.get(source)
        if edges is not None:
            edges.push_front(target)

    def remove_node(self, node_id: str) -> None:
        """Remove a location, its edges and one edge pointing to it from each node."""
        self.nodes.pop(node_id, None)
        self.edges.pop(node_id, None)
        for edges in self.edges.values():
            edges.remove(node_id)

    def add_object_to_node(self, node_id: str, obj: MapObject) -> None:
        node = self.nodes.get(node_id)
        if node is not None:
            node.objects.push_front(obj)

    def remove_object_from_node(self, node_id: str, object_name: str) -> None:
        node = self.nodes.get(node_id)
        if node is not None:
            node.objects.remove_by_uniq_attr(object_name)

    def move_object(self, source: str, target: str, object_name: str) -> None:
        """Move the named object between locations; raises KeyError if either is missing."""
        if source not in self.nodes or target not in self.nodes:
            raise KeyError("Node does not exist")
        src = self.nodes[source]
        obj = src.objects.get_by_uniq_attr(object_name)
        if obj is None:
            raise KeyError("Object does not exist in source node")
        src.objects.remove_by_uniq_attr(object_name)
        self.nodes[target].objects.push_front(obj)

    def shortest_path(self, start: str, goal: str) -> Optional[LinkedList[str]]:
        """Return the locations from ``start`` to ``goal`` inclusive, or None if unreachable."""
        dist: dict[str, int] = {start: 0}
        prev: dict[str, str] = {}
        heap: PriorityQueue[_State] = PriorityQueue()
        heap.push(_State(0, start))

        while not heap.is_empty():
            state = heap.pop()
            if state.position == goal:
                path: LinkedList[str] = LinkedList()
                current: Optional[str] = goal
                while current is not None:
                    path.push_front(current)
                    current = prev.get(current)
                return path

            if state.cost > dist.get(state.position, math.inf):
                continue

            for neighbor in self.edges.get(state.position, ()):
                cost = state.cost + 1
                if cost < dist.get(neighbor, math.inf):
                    heap.push(_State(cost, neighbor))
                    dist[neighbor] = cost
                    prev[neighbor] = state.position
        return None

    def format_graph(self) -> str:
        """Describe every location, its objects and its edges."""
        lines: list[str] = []
        for node_id, node in self.nodes.items():
            lines.append(f"Node ID: {node_id}")
            lines.append(f"  Location Type: {node.location_type.value}")
            lines.append("  Objects:")
            lines.extend(f"    - {obj.name}" for obj in node.objects)
            edges = self.edges.get(node_id)
            if edges is not None:
                lines.append("  Edges:")
                lines.extend(f"    -> {edge}" for edge in edges)
        return "".join(line + "\n" for line in lines)

    def print_graph(self, file: Optional[TextIO] = None) -> None:
        """Write format_graph() to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.format_graph())