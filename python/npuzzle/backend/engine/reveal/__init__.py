from npuzzle.backend.engine.reveal.scheduler import RevealEvent, RevealScheduler

__all__ = ["RevealEvent", "RevealScheduler"]
