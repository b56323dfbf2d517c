from npuzzle.backend.engine.gameplay.game import GamePlay

__all__ = ["GamePlay"]
