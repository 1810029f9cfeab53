from backend.engine.gameplay.game import GamePlay, slide

__all__ = ["GamePlay", "slide"]
