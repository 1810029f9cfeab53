"""Sliding puzzle engine.

The four pure functions a renderer needs: ``generate`` a shuffled grid,
``slide`` a tile, and check a flattened grid with ``is_ordered`` and
``is_solvable``.
"""

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay, slide
from backend.engine.gamerules import Rules
from backend.engine.gamestate import GameState

generate = GameGenerator.generate
is_ordered = Rules.is_ordered
is_solvable = Rules.is_solvable
count_inversions = Rules.count_inversions

__all__ = [
    "GameGenerator",
    "GamePlay",
    "GameState",
    "Rules",
    "count_inversions",
    "generate",
    "is_ordered",
    "is_solvable",
    "slide",
]
