"""Frame-by-frame battle simulation, player statistics and rating upkeep for a base attack and defence game."""

__version__ = "0.1.0"