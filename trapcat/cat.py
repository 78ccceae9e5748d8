"""
The cat. Greedy escape: each turn step to the neighbor closest to the edge.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from trapcat.grid import HexGrid, Position, neighbors
from trapcat.reachability import distance_to_boundary, is_enclosed

logger = logging.getLogger("trapcat.cat")


@dataclass
class Cat:
    grid: HexGrid
    start: Position
    position: Position = field(init=False)

    def __post_init__(self) -> None:
        if not self.grid.is_open(self.start):
            raise ValueError(f"start {self.start} is not an open cell")
        self.position = self.start

    def choose_move(self) -> Position | None:
        """
        Neighbor with the smallest distance to the edge, or None if there is none.

        Ties go to the first neighbor in grid neighbor order. The current cell is
        never a candidate.
        """
        dist = distance_to_boundary(self.grid, self.position)
        best: Position | None = None
        for pos in neighbors(*self.position):
            if pos not in dist or not self.grid.is_open(pos):
                continue
            if best is None or dist[pos] < dist[best]:
                best = pos
        return best

    def step(self) -> bool:
        """Move one cell. False means the cat has no way out and stays put."""
        target = self.choose_move()
        if target is None:
            logger.debug("cat at %s has no legal move", self.position)
            return False
        logger.debug("cat moves %s -> %s", self.position, target)
        self.position = target
        return True

    def is_caught(self) -> bool:
        return is_enclosed(self.grid, self.position)

    def is_on_edge(self) -> bool:
        """On a boundary cell, one step away from leaving the grid."""
        return self.grid.is_boundary(self.position)

    def reset(self) -> None:
        """Back to the start cell. The grid is left alone."""
        self.position = self.start

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "start": list(self.start),
        }
