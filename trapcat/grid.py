"""
Hex grid in offset coordinates. Tracks walls, handles adjacency, renders ASCII.

Cells are addressed (i, j) with i the column and j the row. Odd rows sit half a
cell to the right of even rows, so which cells touch depends on the parity of j.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

Position = tuple[int, int]

NEIGHBOR_NAMES: tuple[str, ...] = (
    "left", "top_left", "top_right", "right", "bottom_right", "bottom_left",
)

# Row parity -> (di, dj) per direction, in NEIGHBOR_NAMES order.
# The order is significant: the cat breaks ties by it.
_NEIGHBOR_OFFSETS: dict[int, tuple[Position, ...]] = {
    0: ((-1, 0), (-1, -1), (0, -1), (1, 0), (0, 1), (-1, 1)),
    1: ((-1, 0), (0, -1), (1, -1), (1, 0), (1, 1), (0, 1)),
}


def neighbors(i: int, j: int) -> list[Position]:
    """The six cells around (i, j). May include cells outside any grid."""
    return [(i + di, j + dj) for di, dj in _NEIGHBOR_OFFSETS[j & 1]]


def cell_center(i: int, j: int, radius: float) -> tuple[float, float]:
    """Pixel centre of cell (i, j) for cells of the given radius."""
    x = radius * 3 + (radius if (j & 1) == 0 else radius * 2) + i * radius * 2
    y = radius * 3 + radius + j * radius * math.sqrt(3)
    return (x, y)


@dataclass
class Cell:
    i: int
    j: int
    is_wall: bool = False


class HexGrid:
    """
    Fixed-size grid of cells. cells[i][j] -> Cell.
    Cells are created once and only their wall flag changes afterwards.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells: list[list[Cell]] = [
            [Cell(i, j) for j in range(height)] for i in range(width)
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        i, j = pos
        return 0 <= i < self.width and 0 <= j < self.height

    def get_cell(self, i: int, j: int) -> Cell | None:
        """The cell at (i, j), or None if the grid has no such cell."""
        if not self.in_bounds((i, j)):
            return None
        return self.cells[i][j]

    def is_wall(self, pos: Position) -> bool:
        cell = self.get_cell(*pos)
        return cell is not None and cell.is_wall

    def is_open(self, pos: Position) -> bool:
        """In bounds and not a wall."""
        cell = self.get_cell(*pos)
        return cell is not None and not cell.is_wall

    def is_boundary(self, pos: Position) -> bool:
        """True for cells on the outer ring. Every such cell has an off-grid neighbor."""
        i, j = pos
        if not self.in_bounds(pos):
            return False
        return i == 0 or j == 0 or i == self.width - 1 or j == self.height - 1

    def neighbors(self, i: int, j: int) -> list[Position]:
        return neighbors(i, j)

    def open_neighbors(self, i: int, j: int) -> list[Position]:
        """Neighbors of (i, j) that are on the grid and not walls, in neighbor order."""
        return [pos for pos in neighbors(i, j) if self.is_open(pos)]

    def boundary_cells(self) -> list[Position]:
        return [
            (cell.i, cell.j)
            for column in self.cells
            for cell in column
            if self.is_boundary((cell.i, cell.j))
        ]

    def walls(self) -> list[Position]:
        return [(cell.i, cell.j) for column in self.cells for cell in column if cell.is_wall]

    @property
    def wall_count(self) -> int:
        return sum(1 for column in self.cells for cell in column if cell.is_wall)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_wall(self, i: int, j: int) -> None:
        """Turn a cell into a wall. Caller must verify the move is legal."""
        cell = self.get_cell(i, j)
        if cell is None:
            raise ValueError(
                f"position {(i, j)} out of bounds for {self.width}x{self.height} grid"
            )
        cell.is_wall = True

    def clear(self) -> None:
        for column in self.cells:
            for cell in column:
                cell.is_wall = False

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_ascii(self, cat_position: Position | None = None) -> str:
        """
        Render the board as text. Odd rows are indented half a cell.

        Example (5x3, cat at (2, 1), wall at (1, 0)):
                0 1 2 3 4
             0  . # . . .
             1   . . C . .
             2  . . . . .
        """
        header = "    " + " ".join(str(i % 10) for i in range(self.width))
        lines = [header]
        for j in range(self.height):
            row: list[str] = []
            for i in range(self.width):
                if (i, j) == cat_position:
                    row.append("C")
                elif self.cells[i][j].is_wall:
                    row.append("#")
                else:
                    row.append(".")
            indent = " " if j & 1 else ""
            lines.append(f"{j:>2}  {indent}" + " ".join(row))
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "walls": [f"{i},{j}" for i, j in self.walls()],
        }
