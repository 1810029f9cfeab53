from backend.models.grid import (
    SCAN_ORDER,
    Direction,
    Grid,
    blank_id,
    dimensions,
    find_blank,
    flatten,
    freeze,
    from_flat,
    home_position,
    solved,
    tile_at,
)

__all__ = [
    "SCAN_ORDER",
    "Direction",
    "Grid",
    "blank_id",
    "dimensions",
    "find_blank",
    "flatten",
    "freeze",
    "from_flat",
    "home_position",
    "solved",
    "tile_at",
]
