"""
Text cost-map loading.

Map files hold one row per line and one digit per cell:

    0000000
    0011100
    0002200

Lines are read bottom-up, so the last line of the file is row y = 0.
Short rows are padded with open cells.

Usage:
    from gridpath.maps import load_map

    cost_map = load_map("maps/demo.txt")
    graph = GridGraph.build(cost_map)
"""

from __future__ import annotations

import logging
import string
from pathlib import Path

from gridpath.config import MAPS_DIR
from gridpath.errors import MapStructureError
from gridpath.graph.terrain import Terrain

logger = logging.getLogger(__name__)


def parse_map(text: str) -> list[list[int]]:
    """
    Parse map text into rows of terrain codes.

    Args:
        text: Map text, one digit per cell

    Returns:
        Rows ordered by y (first row is y = 0), all of equal width

    Raises:
        MapStructureError: If the text has no rows or holds a non-digit cell
    """
    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MapStructureError("Map text has no rows")

    lines.reverse()
    width = max(len(line) for line in lines)

    rows: list[list[int]] = []
    for y, line in enumerate(lines):
        row = []
        for x, char in enumerate(line):
            if char not in string.digits:
                raise MapStructureError(f"Invalid map character {char!r} at ({x}, {y})")
            row.append(int(char))
        row.extend([int(Terrain.OPEN)] * (width - len(row)))
        rows.append(row)
    return rows


def resolve_map_path(path: str | Path) -> Path:
    """Return path as given if it exists, else look it up in MAPS_DIR."""
    path = Path(path)
    if path.exists():
        return path
    candidate = MAPS_DIR / path.name
    if candidate.exists():
        return candidate
    if not path.suffix and candidate.with_suffix(".txt").exists():
        return candidate.with_suffix(".txt")
    raise FileNotFoundError(f"Map file not found: {path}")


def load_map(path: str | Path) -> list[list[int]]:
    """
    Load a text map file.

    Args:
        path: File path, or the name of a map in MAPS_DIR

    Returns:
        Rows of terrain codes, as parse_map()

    Raises:
        FileNotFoundError: If the map cannot be found
        MapStructureError: If the file is not a valid map
    """
    resolved = resolve_map_path(path)
    logger.info(f"Loading map from {resolved}...")
    try:
        text = resolved.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MapStructureError(f"Map file {resolved} is not valid UTF-8 text") from e
    rows = parse_map(text)
    logger.info(f"Loaded {len(rows[0])}x{len(rows)} map")
    return rows
