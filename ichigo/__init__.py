"""A small 2.5D game engine core with voxel geometry and a component tree."""

__version__ = "0.1.0"
__all__ = ["engine", "geom"]