"""Random-play drivers built on the core board."""

from .random_play import GameResult, RandomPlayout, summarize

__all__ = ["GameResult", "RandomPlayout", "summarize"]
