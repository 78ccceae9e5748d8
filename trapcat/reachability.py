"""
Breadth-first reachability over open cells.

One traversal, shortest_distances, backs every query here: whether a cell can
still reach the edge, which cells it can reach, and how far each of those is
from the edge.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable

from trapcat.grid import HexGrid, Position, neighbors


def shortest_distances(grid: HexGrid, sources: Iterable[Position]) -> dict[Position, int]:
    """
    Hop distance from the nearest source to every open cell reachable from one.

    Sources that are walls or off the grid are skipped. Cells are marked when
    enqueued, so each is visited once: O(W*H) time and space.
    """
    dist: dict[Position, int] = {}
    queue: deque[Position] = deque()
    for src in sources:
        if src not in dist and grid.is_open(src):
            dist[src] = 0
            queue.append(src)

    while queue:
        cur = queue.popleft()
        for nxt in neighbors(*cur):
            if nxt in dist or not grid.is_open(nxt):
                continue
            dist[nxt] = dist[cur] + 1
            queue.append(nxt)
    return dist


def reachable_cells(grid: HexGrid, start: Position) -> set[Position]:
    """Open cells connected to start, start included. Empty if start is blocked."""
    return set(shortest_distances(grid, [start]))


def is_enclosed(grid: HexGrid, start: Position) -> bool:
    """True if no open path leads from start to a boundary cell."""
    return not any(grid.is_boundary(pos) for pos in shortest_distances(grid, [start]))


def distance_to_boundary(grid: HexGrid, start: Position) -> dict[Position, int]:
    """
    Distance to the nearest boundary cell for each cell in start's component.

    Cells that cannot reach the boundary are absent; treat absence as blocked.
    """
    component = reachable_cells(grid, start)
    exits = [pos for pos in component if grid.is_boundary(pos)]
    if not exits:
        return {}
    # Every cell of the component is connected to these exits, so the
    # multi-source search covers exactly the component.
    return shortest_distances(grid, exits)
