"""Module s2_cost : Coût minimal d'une séquence à travers la chaîne de robots."""

from .types import MemoKey, CostStats
from .engine import CostEngine, ARM_START, button_pairs

__all__ = [
    # Types
    "MemoKey",
    "CostStats",
    # Moteur
    "CostEngine",
    "ARM_START",
    "button_pairs",
]
