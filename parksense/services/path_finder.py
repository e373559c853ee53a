"""Shortest paths over the trail graph.

Plain Dijkstra: each step scans the whole unvisited set for the node with
the smallest tentative distance, so a search is O(V^2). That is fine for a
single park (a few thousand nodes); a heap-based frontier would be the
next step for anything larger.
"""

import math

from parksense.services.graph_builder import TrailGraph


def shortest_path(trail_graph: TrailGraph, start_id: str, end_id: str) -> list[str] | None:
    """Find the shortest node path from ``start_id`` to ``end_id``.

    Returns:
        Ordered node ids from start to end, ``[start_id]`` when both ids are
        the same node, or None when the end node cannot be reached.

    Raises:
        KeyError: if either id is not a node of ``trail_graph``.
    """
    trail_graph.get_node(start_id)
    trail_graph.get_node(end_id)

    if start_id == end_id:
        return [start_id]

    distances = {node_id: math.inf for node_id in trail_graph.nodes}
    distances[start_id] = 0.0
    previous: dict[str, str] = {}
    unvisited = set(trail_graph.nodes)

    while unvisited:
        current = None
        min_dist = math.inf
        for node_id in unvisited:
            if distances[node_id] < min_dist:
                min_dist = distances[node_id]
                current = node_id

        if current is None:
            break  # everything left is unreachable

        unvisited.remove(current)
        if current == end_id:
            break

        for neighbor_id, weight in trail_graph.nodes[current].adjacency.items():
            if neighbor_id not in unvisited:
                continue
            alt = distances[current] + weight
            if alt < distances[neighbor_id]:
                distances[neighbor_id] = alt
                previous[neighbor_id] = current

    if math.isinf(distances[end_id]):
        return None

    path = [end_id]
    while path[-1] in previous:
        path.append(previous[path[-1]])
    path.reverse()

    if len(path) < 2:
        return None
    return path


def path_length(trail_graph: TrailGraph, path: list[str]) -> float:
    """Sum of edge weights along a node path, in meters."""
    total = 0.0
    for node_a, node_b in zip(path, path[1:]):
        total += trail_graph.get_node(node_a).adjacency[node_b]
    return total
