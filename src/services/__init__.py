"""Services du moteur de relais de claviers."""

from .s0_code_reader_service import parse_code, read_codes, read_codes_file, code_value
from .s1_relay_orchestrator import RelayOrchestrator, RelayTotals, CodeComplexity, compute_totals

__all__ = [
    "parse_code",
    "read_codes",
    "read_codes_file",
    "code_value",
    "RelayOrchestrator",
    "RelayTotals",
    "CodeComplexity",
    "compute_totals",
]
