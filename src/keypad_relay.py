"""Application : lecture des codes → calcul des totaux → logs."""

from __future__ import annotations

import sys
import time
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Optional

from Logs.logger import RunLogger
from src.config import resolve_relay_config
from src.lib.s7_debug.logger import DebugLogger
from src.services import RelayOrchestrator, RelayTotals, read_codes, read_codes_file


class KeypadRelayApp:
    """Calcule les complexités des codes pour deux chaînes de robots."""

    def __init__(self, config: Optional[dict] = None, log_dir: Optional[str] = None):
        relay = resolve_relay_config(config)
        self.shallow_depth = relay['shallow_depth']
        self.deep_depth = relay['deep_depth']
        self.log_dir = log_dir
        self.debug_logger = DebugLogger(log_dir) if log_dir else None
        self.run_logger = RunLogger(log_dir) if log_dir else None

    def run(self, source: Optional[Path] = None) -> RelayTotals:
        """Lit les codes (fichier ou stdin) et retourne les deux totaux."""
        codes = read_codes_file(source) if source else read_codes(sys.stdin)
        return self.run_codes(codes)

    def run_codes(self, codes: Iterable[str]) -> RelayTotals:
        codes = list(codes)
        orchestrator = RelayOrchestrator(
            self.shallow_depth,
            self.deep_depth,
            debug_logger=self.debug_logger,
        )

        start = time.perf_counter()
        totals = orchestrator.run(codes)
        duration = time.perf_counter() - start

        stats = orchestrator.engine.stats
        print(
            f"[RELAY] codes={len(codes)} depths={self.shallow_depth}/{self.deep_depth} "
            f"cache={stats.cache_size} hits={stats.hits} ({duration:.3f}s)",
            file=sys.stderr,
        )

        if self.debug_logger:
            self.debug_logger.log_run(
                len(codes),
                self.shallow_depth,
                self.deep_depth,
                totals.shallow,
                totals.deep,
                duration,
            )
            self.debug_logger.save_session()
        if self.run_logger:
            self.run_logger.save_run_log(
                totals={"shallow": totals.shallow, "deep": totals.deep},
                codes=[asdict(c) for c in totals.codes],
                config={"shallow_depth": self.shallow_depth, "deep_depth": self.deep_depth},
            )
        return totals
