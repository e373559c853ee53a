"""Trail network graph built from raw trail line geometry.

Every coordinate of every line becomes its own node and consecutive
coordinates are joined by an undirected edge weighted with the great-circle
distance. Coordinates shared by two lines are NOT merged, so two trails that
meet at the same physical point stay disconnected and each line forms its
own component.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import networkx as nx

from parksense.models.geo import GeoPoint
from parksense.services.geometry import haversine_distance


logger = logging.getLogger(__name__)

NODE_ID_PREFIX = "node_"


@dataclass
class GraphNode:
    """A point on the trail network."""
    id: str
    position: GeoPoint
    adjacency: dict[str, float] = field(default_factory=dict)  # neighbor id -> meters


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float  # meters


class TrailGraph:
    """Graph representation of the park trail network.

    Built once per trail dataset and treated as read-only afterwards, so a
    single instance can be shared between concurrent requests.
    """

    def __init__(self, lines: Iterable[Sequence[GeoPoint]]):
        self.nodes: dict[str, GraphNode] = {}
        self.edges: list[Edge] = []
        self.line_count = 0
        self.graph = nx.Graph()

        self._next_id = 0
        self._build_graph(lines)
        self.graph = nx.freeze(self.graph)

    def _new_node(self, position: GeoPoint) -> GraphNode:
        node = GraphNode(id=f"{NODE_ID_PREFIX}{self._next_id}", position=position)
        self._next_id += 1
        self.nodes[node.id] = node
        self.graph.add_node(node.id, lat=position.lat, lon=position.lon)
        return node

    def _connect(self, node_a: GraphNode, node_b: GraphNode):
        distance = haversine_distance(node_a.position, node_b.position)
        node_a.adjacency[node_b.id] = distance
        node_b.adjacency[node_a.id] = distance
        self.edges.append(Edge(source=node_a.id, target=node_b.id, weight=distance))
        self.graph.add_edge(node_a.id, node_b.id, weight=distance)

    def _build_graph(self, lines: Iterable[Sequence[GeoPoint]]):
        for line in lines:
            if len(line) < 2:
                raise ValueError(
                    f"Trail line {self.line_count} has {len(line)} coordinate(s); at least 2 are required"
                )

            line_nodes = [self._new_node(point) for point in line]
            for node_a, node_b in zip(line_nodes, line_nodes[1:]):
                self._connect(node_a, node_b)
            self.line_count += 1

        logger.info("Built trail graph: %d nodes, %d edges from %d lines",
                    len(self.nodes), len(self.edges), self.line_count)

    def __len__(self) -> int:
        return len(self.nodes)

    def get_node(self, node_id: str) -> GraphNode:
        """Get node by ID, raising KeyError for ids not in this graph."""
        try:
            return self.nodes[node_id]
        except KeyError:
            raise KeyError(f"Node {node_id!r} is not part of the trail graph") from None

    def get_node_position(self, node_id: str) -> GeoPoint:
        return self.get_node(node_id).position

    def get_stats(self) -> dict:
        """Get graph statistics."""
        return {
            "num_nodes": len(self.nodes),
            "num_edges": len(self.edges),
            "num_lines": self.line_count,
            "num_components": nx.number_connected_components(self.graph) if self.nodes else 0,
            "total_length_m": sum(e.weight for e in self.edges),
        }


def build_trail_graph(lines: Iterable[Sequence[GeoPoint]]) -> TrailGraph:
    """Build trail graph from trail line geometries."""
    return TrailGraph(lines)


def find_nearest_node(point: GeoPoint, trail_graph: TrailGraph) -> GraphNode | None:
    """Find the graph node closest to ``point`` by linear scan.

    Returns None for an empty graph. On an exact tie the first node in
    insertion order wins.
    """
    min_dist = float("inf")
    nearest = None

    for node in trail_graph.nodes.values():
        dist = haversine_distance(point, node.position)
        if dist < min_dist:
            min_dist = dist
            nearest = node

    return nearest
