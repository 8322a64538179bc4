"""Orchestrateur : coût pondéré de chaque code aux deux profondeurs.

L'orchestrateur ne gère que :
- Un seul moteur de coût (cache partagé entre codes et profondeurs)
- La pondération par la valeur numérique du code
- L'accumulation des deux totaux
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from src.config import RELAY_CONFIG
from src.lib.s0_keypad import KeypadTopology, numeric_keypad
from src.lib.s2_cost import CostEngine
from src.lib.s7_debug.logger import DebugLogger
from .s0_code_reader_service import code_value


@dataclass
class CodeComplexity:
    """Résultat pour un code."""
    code: str
    value: int
    shallow_cost: int
    deep_cost: int

    @property
    def shallow_complexity(self) -> int:
        return self.shallow_cost * self.value

    @property
    def deep_complexity(self) -> int:
        return self.deep_cost * self.value


@dataclass
class RelayTotals:
    """Totaux pondérés aux deux profondeurs."""
    shallow: int = 0
    deep: int = 0
    codes: List[CodeComplexity] = field(default_factory=list)

    def as_tuple(self):
        return (self.shallow, self.deep)


class RelayOrchestrator:
    """Pilote le CostEngine pour chaque code aux profondeurs configurées."""

    def __init__(
        self,
        shallow_depth: int = RELAY_CONFIG['shallow_depth'],
        deep_depth: int = RELAY_CONFIG['deep_depth'],
        target: Optional[KeypadTopology] = None,
        debug_logger: Optional[DebugLogger] = None,
    ):
        self.shallow_depth = shallow_depth
        self.deep_depth = deep_depth
        self.target = target or numeric_keypad()
        self.debug_logger = debug_logger
        self.engine = CostEngine(self.target)

    def price(self, code: str) -> CodeComplexity:
        """Coût d'un code aux deux profondeurs."""
        start = time.perf_counter()
        result = CodeComplexity(
            code=code,
            value=code_value(code),
            shallow_cost=self.engine.cost(code, self.shallow_depth),
            deep_cost=self.engine.cost(code, self.deep_depth),
        )
        if self.debug_logger:
            self.debug_logger.log_code(
                code,
                result.value,
                result.shallow_cost,
                result.deep_cost,
                duration=time.perf_counter() - start,
                metadata={"cache_size": self.engine.stats.cache_size},
            )
        return result

    def run(self, codes: Iterable[str]) -> RelayTotals:
        """Accumule les totaux pondérés de tous les codes."""
        totals = RelayTotals()
        for code in codes:
            result = self.price(code)
            totals.shallow += result.shallow_complexity
            totals.deep += result.deep_complexity
            totals.codes.append(result)
        return totals


# === API fonctionnelle ===

def compute_totals(
    codes: Iterable[str],
    shallow_depth: int = RELAY_CONFIG['shallow_depth'],
    deep_depth: int = RELAY_CONFIG['deep_depth'],
) -> RelayTotals:
    """Calcule les deux totaux pondérés pour une liste de codes."""
    return RelayOrchestrator(shallow_depth, deep_depth).run(codes)
