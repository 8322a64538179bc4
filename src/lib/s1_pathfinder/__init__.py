"""Module s1_pathfinder : Chemins minimaux entre deux boutons d'un clavier."""

from .types import PathSet, ButtonPair, PathCacheInfo
from .pathfinder import PathFinder

__all__ = [
    # Types
    "PathSet",
    "ButtonPair",
    "PathCacheInfo",
    # PathFinder
    "PathFinder",
]
