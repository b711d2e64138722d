"""Tennis season building blocks: players, tournaments, set and match simulation, CSV rosters."""

__version__ = "0.1.0"
__all__ = ["category", "player", "tournament", "simulation", "roster"]