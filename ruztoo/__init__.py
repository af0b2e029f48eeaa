"""Map model, components, per-turn systems and console drawing for a dungeon roguelike."""

__version__ = "0.1.0"