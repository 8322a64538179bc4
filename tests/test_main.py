import json

from Logs.logger import RunLogger
from src.keypad_relay import KeypadRelayApp
from src.main import main


def _write_codes(tmp_path, text="029A\n980A\n179A\n456A\n379A\n"):
    path = tmp_path / "codes.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_prints_two_totals(tmp_path, capsys):
    assert main([str(_write_codes(tmp_path))]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["126384", "154115708116294"]


def test_cli_depth_overrides(tmp_path, capsys):
    assert main([str(_write_codes(tmp_path, "029A\n")), "--shallow", "0", "--deep", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == [str(4 * 29), str(12 * 29)]


def test_cli_yaml_config(tmp_path, capsys):
    config = tmp_path / "relay.yaml"
    config.write_text("relay:\n  shallow_depth: 2\n  deep_depth: 3\n", encoding="utf-8")
    assert main([str(_write_codes(tmp_path, "029A\n")), "--config", str(config)]) == 0
    assert capsys.readouterr().out.splitlines() == [str(28 * 29), str(68 * 29)]


def test_cli_rejects_malformed_input(tmp_path, capsys):
    assert main([str(_write_codes(tmp_path, "029A\n9x0A\n"))]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("[ERREUR]")
    assert captured.out == ""


def test_cli_rejects_non_mapping_relay_section(tmp_path, capsys):
    config = tmp_path / "relay.yaml"
    config.write_text("relay: 3\n", encoding="utf-8")
    assert main([str(_write_codes(tmp_path, "029A\n")), "--config", str(config)]) == 1
    captured = capsys.readouterr()
    assert "relay" in captured.err
    assert captured.out == ""


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1


def test_app_writes_logs(tmp_path):
    log_dir = tmp_path / "logs"
    app = KeypadRelayApp(config={"shallow_depth": 1, "deep_depth": 2}, log_dir=str(log_dir))
    totals = app.run(_write_codes(tmp_path, "029A\n"))

    assert totals.as_tuple() == (12 * 29, 28 * 29)
    report = RunLogger(str(log_dir)).get_latest_log()
    data = json.loads(open(report, encoding="utf-8").read())
    assert data["totals"] == {"shallow": 12 * 29, "deep": 28 * 29}
    assert data["codes"][0]["code"] == "029A"
    assert list(log_dir.glob("session_*.json"))
