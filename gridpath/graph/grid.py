"""
Grid graph built from a 2-D cost map.

Every cell becomes an immutable Node; traversable cells are linked to
their in-bounds, traversable neighbors in all 8 directions. The graph
holds no search state, so any number of searches can share it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from gridpath.config import DIAGONAL_COST, STRAIGHT_COST
from gridpath.errors import MapStructureError
from gridpath.graph.terrain import TERRAIN_CODES, Terrain, resolve_terrain_costs

logger = logging.getLogger(__name__)

Cell = tuple[int, int]  # (x, y)

# Unit and diagonal offsets, clockwise from north
DIRECTIONS: tuple[Cell, ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


@dataclass(frozen=True)
class Node:
    """
    A single grid cell.

    Attributes:
        x: Column index
        y: Row index
        terrain: Terrain class of the cell
        index: Dense index into per-run state arrays
        neighbors: Indices of nodes reachable in one 8-directional step
    """

    x: int
    y: int
    terrain: Terrain
    index: int
    neighbors: tuple[int, ...] = ()

    @property
    def cell(self) -> Cell:
        return (self.x, self.y)

    @property
    def position(self) -> tuple[float, float, float]:
        """World-space position for presentation code (x, 0, y)."""
        return (float(self.x), 0.0, float(self.y))

    @property
    def is_blocked(self) -> bool:
        return self.terrain.is_blocked


def _as_code_array(cost_map) -> np.ndarray:
    """Validate a cost map and return it as a (height, width) int array."""
    if not isinstance(cost_map, np.ndarray):
        try:
            rows = [list(row) for row in cost_map]
        except TypeError as e:
            raise MapStructureError("Cost map must be a sequence of rows") from e
        if not rows or not rows[0]:
            raise MapStructureError("Cost map is empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MapStructureError(
                    f"Cost map is not rectangular: row {y} has {len(row)} cells, expected {width}"
                )
        cost_map = rows

    try:
        codes = np.asarray(cost_map)
    except ValueError as e:
        raise MapStructureError(f"Cost map is not rectangular: {e}") from e

    if codes.size == 0:
        raise MapStructureError("Cost map is empty")
    if codes.ndim != 2:
        raise MapStructureError(f"Cost map must be 2-D, got {codes.ndim} dimension(s)")

    if not np.issubdtype(codes.dtype, np.integer):
        if not np.issubdtype(codes.dtype, np.number) or not np.all(np.mod(codes, 1) == 0):
            raise MapStructureError(f"Cost map must hold integer codes, got dtype {codes.dtype}")
        codes = codes.astype(np.int64)

    unknown = sorted(set(np.unique(codes).tolist()) - TERRAIN_CODES)
    if unknown:
        raise MapStructureError(f"Cost map holds unknown terrain codes: {unknown}")

    return codes


class GridGraph:
    """
    8-connected grid graph with terrain-classified nodes.

    Build with GridGraph.build(cost_map). The map is a sequence of rows,
    so cost_map[y][x] describes cell (x, y).

    Attributes:
        width: Number of columns
        height: Number of rows
        nodes: All nodes, ordered by index
        blocked: Nodes whose terrain is BLOCKED
    """

    def __init__(
        self,
        width: int,
        height: int,
        nodes: Sequence[Node],
        terrain_costs: Mapping[Terrain, float],
    ) -> None:
        self._width = width
        self._height = height
        self._nodes = tuple(nodes)
        self._terrain_costs = dict(terrain_costs)
        self._blocked = tuple(node for node in self._nodes if node.is_blocked)

    @classmethod
    def build(
        cls,
        cost_map,
        terrain_costs: Mapping[int, float] | None = None,
    ) -> GridGraph:
        """
        Build a graph from a cost map.

        Args:
            cost_map: Rectangular 2-D array of terrain codes (0 open,
                1 blocked, 2/3/4 light/medium/heavy terrain)
            terrain_costs: Optional per-code cost overrides

        Returns:
            The constructed GridGraph

        Raises:
            MapStructureError: If the map is empty, non-rectangular or
                holds unknown codes
        """
        codes = _as_code_array(cost_map)
        costs = resolve_terrain_costs(terrain_costs)
        height, width = codes.shape
        blocked = codes == int(Terrain.BLOCKED)

        nodes: list[Node] = []
        for y in range(height):
            for x in range(width):
                neighbors: tuple[int, ...] = ()
                if not blocked[y, x]:
                    neighbors = tuple(
                        ny * width + nx
                        for nx, ny in ((x + dx, y + dy) for dx, dy in DIRECTIONS)
                        if 0 <= nx < width and 0 <= ny < height and not blocked[ny, nx]
                    )
                nodes.append(
                    Node(
                        x=x,
                        y=y,
                        terrain=Terrain(int(codes[y, x])),
                        index=y * width + x,
                        neighbors=neighbors,
                    )
                )

        graph = cls(width, height, nodes, costs)
        logger.debug(
            f"Built {width}x{height} grid graph ({len(graph.blocked)} blocked cells)"
        )
        return graph

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def blocked(self) -> tuple[Node, ...]:
        return self._blocked

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def node(self, x: int, y: int) -> Node:
        """
        Get the node at (x, y).

        Raises:
            IndexError: If (x, y) is out of bounds
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self._width}x{self._height} grid")
        return self._nodes[y * self._width + x]

    def node_at(self, cell: Cell) -> Node:
        return self.node(*cell)

    def neighbors(self, node: Node) -> list[Node]:
        """Nodes reachable from node in one step."""
        return [self._nodes[i] for i in node.neighbors]

    def terrain_cost(self, node: Node) -> float:
        """Movement-cost add-on for leaving node. Blocked cells cost inf."""
        if node.is_blocked:
            return float("inf")
        return self._terrain_costs[node.terrain]

    # -------------------------------------------------------------------------
    # Distance metrics
    # -------------------------------------------------------------------------

    @staticmethod
    def octile_cost(a: Node, b: Node) -> float:
        """Octile distance: 1.4 per diagonal step, 1.0 per straight step."""
        dx = abs(a.x - b.x)
        dy = abs(a.y - b.y)
        diagonal = min(dx, dy)
        straight = max(dx, dy) - diagonal
        return DIAGONAL_COST * diagonal + STRAIGHT_COST * straight

    def edge_cost(self, a: Node, b: Node) -> float:
        """Traversal cost between two adjacent nodes, ignoring terrain."""
        return self.octile_cost(a, b)

    @staticmethod
    def heuristic_cost(a: Node, b: Node) -> float:
        """Manhattan distance |dx| + |dy|."""
        return float(abs(a.x - b.x) + abs(a.y - b.y))

    # -------------------------------------------------------------------------
    # Dunder helpers
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, tuple) or len(cell) != 2:
            return False
        return self.in_bounds(*cell)

    def __repr__(self) -> str:
        return f"GridGraph(width={self._width}, height={self._height}, blocked={len(self._blocked)})"
