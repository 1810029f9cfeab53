from backend.engine.gamestate.state import GameState

__all__ = ["GameState"]
