"""CostEngine : nombre minimal d'appuis humains pour une séquence relayée."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from src.config import ACTIVATE_SYMBOL
from src.lib.s0_keypad.topology import KeypadTopology, directional_keypad
from src.lib.s0_keypad.types import KeypadId
from src.lib.s1_pathfinder.pathfinder import PathFinder
from .types import CostStats, MemoKey

# Après chaque appui, le bras d'un robot repose sur le bouton de validation.
ARM_START = ACTIVATE_SYMBOL


def button_pairs(sequence: str) -> Iterator[Tuple[str, str]]:
    """Paires (précédent, courant) d'une séquence, en partant de ARM_START.

    >>> list(button_pairs("029A"))
    [('A', '0'), ('0', '2'), ('2', '9'), ('9', 'A')]
    """
    return zip(ARM_START + sequence, sequence)


class CostEngine:
    """
    Moteur de coût récursif et mémoïsé.

    Précondition : le bras du clavier qui reçoit `sequence` repose sur
    ARM_START avant le premier bouton. C'est ce qui permet de découper la
    séquence en paires adjacentes indépendantes.

    Le cache appartient à l'instance et persiste entre les codes : il est
    indexé par (séquence, profondeur restante, identité du clavier).
    """

    def __init__(
        self,
        target: KeypadTopology,
        directional: Optional[KeypadTopology] = None,
    ):
        self.target = target
        self.directional = directional or directional_keypad()
        if self.directional.keypad_id is not KeypadId.DIRECTIONAL:
            raise ValueError("Le clavier relais doit être directionnel")

        self._topologies: Dict[KeypadId, KeypadTopology] = {
            self.directional.keypad_id: self.directional,
            self.target.keypad_id: self.target,
        }
        self._pathfinders: Dict[KeypadId, PathFinder] = {
            keypad_id: PathFinder(topology) for keypad_id, topology in self._topologies.items()
        }
        self._cost_cache: Dict[MemoKey, int] = {}
        self._stats = CostStats()

    def cost(self, sequence: str, depth: int, keypad_id: Optional[KeypadId] = None) -> int:
        """
        Nombre minimal d'appuis humains pour que le clavier `keypad_id`
        reçoive `sequence` à travers `depth` niveaux.

        Args:
            sequence: Boutons à saisir (non vide, conventionnellement terminée par 'A')
            depth: Nombre de claviers entre l'humain et le clavier cible
            keypad_id: Clavier qui reçoit la séquence (défaut: clavier cible)

        Returns:
            int: Nombre d'appuis de l'humain
        """
        keypad_id = keypad_id or self.target.keypad_id
        topology = self._topologies.get(keypad_id)
        if topology is None:
            raise KeyError(f"Clavier non géré par ce moteur: {keypad_id}")
        if not sequence:
            raise ValueError("La séquence à évaluer est vide")
        if depth < 0:
            raise ValueError(f"Profondeur négative: {depth}")
        topology.validate_sequence(sequence)
        return self._cost(sequence, depth, keypad_id)

    def _cost(self, sequence: str, depth: int, keypad_id: KeypadId) -> int:
        # L'humain tape directement la séquence
        if depth == 0:
            return len(sequence)

        key = MemoKey(sequence, depth, keypad_id)
        cached = self._cost_cache.get(key)
        if cached is not None:
            self._stats.hits += 1
            return cached
        self._stats.misses += 1

        pathfinder = self._pathfinders[keypad_id]
        total = 0
        for previous, current in button_pairs(sequence):
            # Chaque chemin ex aequo est évalué : le moins cher en aval l'emporte
            total += min(
                self._cost(candidate, depth - 1, KeypadId.DIRECTIONAL)
                for candidate in pathfinder.minimal_paths(previous, current)
            )

        self._stats.computations += 1
        self._cost_cache[key] = total
        return total

    @property
    def stats(self) -> CostStats:
        return CostStats(
            hits=self._stats.hits,
            misses=self._stats.misses,
            computations=self._stats.computations,
            cache_size=len(self._cost_cache),
        )

    def pathfinder(self, keypad_id: KeypadId) -> PathFinder:
        return self._pathfinders[keypad_id]

    def clear_cache(self) -> None:
        self._cost_cache.clear()
        self._stats = CostStats()
