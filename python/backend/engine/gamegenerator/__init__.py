from backend.engine.gamegenerator.generator import MAX_SHUFFLE_ATTEMPTS, GameGenerator

__all__ = ["MAX_SHUFFLE_ATTEMPTS", "GameGenerator"]
