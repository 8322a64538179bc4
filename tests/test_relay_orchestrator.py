import json

from src.lib.s7_debug import DebugLogger
from src.services import RelayOrchestrator, compute_totals

EXAMPLE_CODES = ["029A", "980A", "179A", "456A", "379A"]


def test_example_totals():
    totals = compute_totals(EXAMPLE_CODES, shallow_depth=3, deep_depth=26)
    assert totals.as_tuple() == (126384, 154115708116294)


def test_per_code_complexities():
    totals = RelayOrchestrator(3, 26).run(EXAMPLE_CODES)
    by_code = {c.code: c for c in totals.codes}

    assert by_code["029A"].value == 29
    assert by_code["029A"].shallow_cost == 68
    assert by_code["029A"].shallow_complexity == 68 * 29
    assert [c.code for c in totals.codes] == EXAMPLE_CODES
    assert sum(c.shallow_complexity for c in totals.codes) == totals.shallow
    assert sum(c.deep_complexity for c in totals.codes) == totals.deep


def test_totals_do_not_depend_on_code_order():
    forward = compute_totals(EXAMPLE_CODES)
    backward = compute_totals(list(reversed(EXAMPLE_CODES)))
    assert forward.as_tuple() == backward.as_tuple()


def test_engine_persists_across_codes():
    orchestrator = RelayOrchestrator(3, 26)
    orchestrator.run(EXAMPLE_CODES[:1])
    size = orchestrator.engine.stats.cache_size
    orchestrator.run(EXAMPLE_CODES[:1])
    assert orchestrator.engine.stats.cache_size == size


def test_shallow_depth_reuses_deep_entries():
    orchestrator = RelayOrchestrator(3, 26)
    engine = orchestrator.engine
    for code in EXAMPLE_CODES:
        engine.cost(code, 26)
    before = set(engine._cost_cache)
    computations = engine.stats.computations

    totals = orchestrator.run(EXAMPLE_CODES)

    added = set(engine._cost_cache) - before
    assert engine.stats.computations - computations == len(added)
    # Seuls le code lui-même et les chemins du clavier numérique sont nouveaux
    assert all(key.depth >= 2 for key in added)
    assert totals.as_tuple() == (126384, 154115708116294)


def test_empty_input_gives_zero_totals():
    assert compute_totals([]).as_tuple() == (0, 0)


def test_debug_logger_records_codes(tmp_path):
    logger = DebugLogger(str(tmp_path))
    RelayOrchestrator(2, 3, debug_logger=logger).run(["029A"])

    assert len(logger.codes) == 1
    assert logger.codes[0].shallow_cost == 28
    lines = (tmp_path / f"codes_{logger.session_id}.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["code"] == "029A"

    summary = logger.get_summary()
    assert summary["codes"] == 1
    assert summary["shallow_total"] == 28 * 29
    assert summary["deep_total"] == 68 * 29
    assert summary["runs"] == 0
