"""PathFinder : énumération exhaustive des chemins minimaux sur un clavier."""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional, Tuple

from src.config import ACTIVATE_SYMBOL
from src.lib.s0_keypad.topology import DIRECTIONS, KeypadTopology
from src.lib.s0_keypad.types import StepOutcome
from .types import ButtonPair, PathCacheInfo, PathSet


class PathFinder:
    """
    Chemins de longueur minimale pour déplacer un bras d'un bouton à un autre.

    Tous les chemins ex aequo sont conservés : selon l'ordre des
    mouvements, le coût en aval dans la chaîne de robots peut différer.
    Le cache (start, end) appartient à l'instance.
    """

    def __init__(self, topology: KeypadTopology):
        self.topology = topology
        self._paths_cache: Dict[ButtonPair, PathSet] = {}
        self._info = PathCacheInfo()

    def minimal_paths(self, start: str, end: str) -> PathSet:
        """Retourne toutes les séquences minimales de start à end (terminées par 'A')."""
        key = (start, end)
        cached = self._paths_cache.get(key)
        if cached is not None:
            self._info.hits += 1
            return cached

        self._info.misses += 1
        paths = self._search(start, end)
        self._paths_cache[key] = paths
        self._info.size = len(self._paths_cache)
        return paths

    def _search(self, start: str, end: str) -> PathSet:
        # Valide les deux boutons avant la recherche
        self.topology.position_of(start)
        self.topology.position_of(end)

        stack: List[Tuple[str, FrozenSet[str], str]] = [(start, frozenset(), "")]
        found: List[str] = []
        best: Optional[int] = None

        while stack:
            symbol, visited, path = stack.pop()

            # Un chemin plus long que le meilleur connu serait filtré de toute façon
            if best is not None and len(path) + 1 > best:
                continue

            if symbol == end:
                complete = path + ACTIVATE_SYMBOL
                found.append(complete)
                if best is None or len(complete) < best:
                    best = len(complete)
                continue

            if symbol in visited:
                continue
            visited = visited | {symbol}

            position = self.topology.position_of(symbol)
            for direction in DIRECTIONS:
                outcome, target = self.topology.step(position, direction)
                if outcome is not StepOutcome.BUTTON:
                    continue
                next_symbol = self.topology.button_at(target)
                stack.append((next_symbol, visited, path + direction.symbol))

        return frozenset(p for p in found if len(p) == best)

    def cache_info(self) -> PathCacheInfo:
        return PathCacheInfo(hits=self._info.hits, misses=self._info.misses, size=self._info.size)

    def clear_cache(self) -> None:
        self._paths_cache.clear()
        self._info = PathCacheInfo()

