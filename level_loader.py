# level_loader.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from level import Level
from settings import TILE_SIZE

log = logging.getLogger(__name__)

# Used in place of an entry that doesn't describe a usable grid
FALLBACK_GRID = [[1, 1], [1, 1]]


def load_levels_data(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    # basic validation
    if not isinstance(data, dict) or not isinstance(data.get("levels"), list):
        raise ValueError("Levels JSON must include a 'levels' list")
    return data


def grid_from_entry(entry: Any) -> List[list] | None:
    """A level entry is either the grid itself or an object with a `grid` field."""
    if isinstance(entry, list):
        return entry
    if isinstance(entry, dict) and isinstance(entry.get("grid"), list):
        return entry["grid"]
    return None


def build_level(entry: Any, tile_size: float = TILE_SIZE, index: int | None = None) -> Level:
    where = f"level {index}" if index is not None else "level entry"
    grid = grid_from_entry(entry)
    if grid is None:
        log.warning("%s has no grid, using fallback", where)
        return Level(FALLBACK_GRID, tile_size)
    try:
        return Level(grid, tile_size)
    except (ValueError, TypeError) as e:
        log.warning("%s is malformed (%s), using fallback", where, e)
        return Level(FALLBACK_GRID, tile_size)


def build_levels(data: Dict[str, Any], tile_size: float = TILE_SIZE) -> List[Level]:
    levels = [build_level(entry, tile_size, i) for i, entry in enumerate(data["levels"])]
    log.info("built %d level(s)", len(levels))
    return levels


def load_levels(path: str | Path, tile_size: float = TILE_SIZE) -> List[Level]:
    return build_levels(load_levels_data(path), tile_size)
