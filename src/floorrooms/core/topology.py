"""Topology analysis for floor plans.

This module turns the points and walls of a plan into a graph and finds
the closed wall loops that are candidate rooms.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx

from .errors import DanglingWallError, DuplicatePointError
from .model import Point, Wall

LOGGER = logging.getLogger(__name__)

Cycle = Tuple[int, ...]


def point_index(points: Sequence[Point]) -> Dict[Tuple[float, float], int]:
    """Map point coordinates to their index in the plan.

    Args:
        points: Points of the plan, in document order.

    Returns:
        Dictionary mapping (x, z) to the point index.

    Raises:
        DuplicatePointError: If two points share the same coordinates.
    """
    index: Dict[Tuple[float, float], int] = {}
    for i, point in enumerate(points):
        if point.key in index:
            raise DuplicatePointError(index[point.key], i, point.key)
        index[point.key] = i
    return index


def build_plan_graph(points: Sequence[Point], walls: Iterable[Wall]) -> nx.DiGraph:
    """Build the wall graph of a plan.

    Every point becomes a vertex, keyed by its index. Every wall is inserted
    as a pair of directed edges, one per traversal direction.

    Args:
        points: Points of the plan.
        walls: Walls of the plan.

    Returns:
        NetworkX DiGraph with point indices as nodes.

    Raises:
        DanglingWallError: If a wall endpoint matches no point.
        DuplicatePointError: If two points share the same coordinates.
    """
    index = point_index(points)

    G = nx.DiGraph()
    for i, point in enumerate(points):
        G.add_node(i, id=point.id, value=1)

    for wall_index, wall in enumerate(walls):
        ends = []
        for coords in (wall.start, wall.end):
            if coords not in index:
                raise DanglingWallError(wall_index, coords)
            ends.append(index[coords])
        a, b = ends
        G.add_edge(a, b, value=1)
        G.add_edge(b, a, value=1)

    return G


def canonical_cycle(path: Sequence[int]) -> Cycle:
    """Return a key shared by all rotations and reflections of a cycle.

    The key starts at the smallest vertex and runs in whichever direction
    gives the lexicographically smaller sequence.
    """
    n = len(path)
    if n == 0:
        return tuple()

    start = path.index(min(path))
    forward = tuple(path[start:]) + tuple(path[:start])
    backward = (forward[0],) + tuple(reversed(forward[1:]))
    return min(forward, backward)


def find_cycles(graph: nx.DiGraph) -> List[Cycle]:
    """Enumerate every simple cycle of the wall graph.

    Walks from each vertex through neighbours with a larger index only, so
    each loop is explored from its smallest vertex. Walking a wall and back
    is not a cycle: only loops of three or more vertices are reported.

    Args:
        graph: Graph built by :func:`build_plan_graph`.

    Returns:
        List of cycles in canonical form, in discovery order.
    """
    adjacency = {node: sorted(graph.successors(node)) for node in sorted(graph.nodes)}

    found: List[Cycle] = []
    seen = set()

    for start in adjacency:
        path = [start]
        on_path = {start}
        stack = [iter(adjacency[start])]

        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                on_path.discard(path.pop())
                continue

            if nxt == start:
                if len(path) > 2:
                    cycle = canonical_cycle(path)
                    if cycle not in seen:
                        seen.add(cycle)
                        found.append(cycle)
                continue

            if nxt < start or nxt in on_path:
                continue

            path.append(nxt)
            on_path.add(nxt)
            stack.append(iter(adjacency[nxt]))

    LOGGER.debug("Found %d simple cycles in %d vertices", len(found), len(adjacency))
    return found


def reduce_cycles(cycles: Sequence[Cycle]) -> List[Cycle]:
    """Remove loops that contain other loops.

    A cycle is dropped when another cycle's vertices all appear among its own
    vertices: it is a larger loop crossed by a chord, not a single room.
    Among cycles over the same vertex set only the first one is kept.

    Every cycle is checked against all other candidates, earlier ones
    included, so which loops survive does not depend on enumeration order.
    Loops that share no vertex with each other are never compared here.

    Args:
        cycles: Candidate cycles in enumeration order.

    Returns:
        The remaining cycles, in their original order.
    """
    vertex_sets = [frozenset(cycle) for cycle in cycles]
    kept = []

    for i, cycle in enumerate(cycles):
        own = vertex_sets[i]
        redundant = False
        for j, other in enumerate(vertex_sets):
            if j == i:
                continue
            if other < own or (other == own and j < i):
                redundant = True
                break

        if redundant:
            LOGGER.debug("Dropping cycle %s: it contains cycle %s", cycle, cycles[j])
        else:
            kept.append(cycle)

    return kept
