"""A terminal Qwirkle game for several players or against a computer opponent."""

__version__ = "1.0.0"
__all__ = ["tiles", "tilebag", "players", "board", "ai", "state", "gameplay", "cli"]