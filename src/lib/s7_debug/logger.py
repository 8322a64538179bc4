"""Logger structuré pour le debug."""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Any


@dataclass
class CodeLog:
    """Log du calcul d'un code."""
    code: str
    timestamp: str
    value: int
    shallow_cost: int
    deep_cost: int
    duration: float
    metadata: Dict[str, Any]


@dataclass
class RunLog:
    """Log d'une exécution complète."""
    timestamp: str
    codes_count: int
    shallow_depth: int
    deep_depth: int
    shallow_total: int
    deep_total: int
    duration: float
    success: bool
    error: Optional[str] = None


class DebugLogger:
    """Logger structuré pour le debug."""

    def __init__(self, log_dir: str = "logs"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.codes: List[CodeLog] = []
        self.runs: List[RunLog] = []

    def log_code(
        self,
        code: str,
        value: int,
        shallow_cost: int,
        deep_cost: int,
        duration: float = 0.0,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log le coût d'un code aux deux profondeurs."""
        log = CodeLog(
            code=code,
            timestamp=datetime.now().isoformat(),
            value=value,
            shallow_cost=shallow_cost,
            deep_cost=deep_cost,
            duration=duration,
            metadata=metadata or {},
        )
        self.codes.append(log)
        self._write_log("codes", asdict(log))

    def log_run(
        self,
        codes_count: int,
        shallow_depth: int,
        deep_depth: int,
        shallow_total: int,
        deep_total: int,
        duration: float,
        success: bool = True,
        error: Optional[str] = None,
    ) -> None:
        """Log une exécution."""
        log = RunLog(
            timestamp=datetime.now().isoformat(),
            codes_count=codes_count,
            shallow_depth=shallow_depth,
            deep_depth=deep_depth,
            shallow_total=shallow_total,
            deep_total=deep_total,
            duration=duration,
            success=success,
            error=error,
        )
        self.runs.append(log)
        self._write_log("runs", asdict(log))

    def save_session(self) -> str:
        """Sauvegarde la session complète."""
        session_file = self.log_dir / f"session_{self.session_id}.json"
        data = {
            "session_id": self.session_id,
            "total_codes": len(self.codes),
            "total_runs": len(self.runs),
            "codes": [asdict(c) for c in self.codes],
            "runs": [asdict(r) for r in self.runs],
        }
        with open(session_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return str(session_file)

    def get_summary(self) -> Dict[str, Any]:
        """Retourne un résumé de la session."""
        return {
            "session_id": self.session_id,
            "codes": len(self.codes),
            "runs": len(self.runs),
            "shallow_total": sum(c.shallow_cost * c.value for c in self.codes),
            "deep_total": sum(c.deep_cost * c.value for c in self.codes),
            "total_duration": sum(c.duration for c in self.codes),
            "success_rate": sum(1 for r in self.runs if r.success) / max(1, len(self.runs)),
        }

    def _write_log(self, log_type: str, data: Dict[str, Any]) -> None:
        """Écrit un log dans un fichier."""
        log_file = self.log_dir / f"{log_type}_{self.session_id}.jsonl"
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(data, ensure_ascii=False) + "\n")

