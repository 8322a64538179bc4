import pytest

from src.config import KEYPAD_LAYOUTS, RELAY_CONFIG, load_config, relay_section, resolve_relay_config


def test_defaults():
    assert resolve_relay_config() == {"shallow_depth": 3, "deep_depth": 26}
    assert RELAY_CONFIG == {"shallow_depth": 3, "deep_depth": 26}
    assert set(KEYPAD_LAYOUTS) == {"numeric", "directional"}


def test_flat_and_nested_overrides():
    assert resolve_relay_config({"deep_depth": 10})["deep_depth"] == 10
    assert resolve_relay_config({"relay": {"shallow_depth": 1}})["shallow_depth"] == 1


@pytest.mark.parametrize("value", [-1, "3", 2.5, True])
def test_invalid_depths(value):
    with pytest.raises(ValueError):
        resolve_relay_config({"shallow_depth": value})


def test_load_yaml(tmp_path):
    path = tmp_path / "relay.yaml"
    path.write_text("relay:\n  shallow_depth: 2\n  deep_depth: 5\n", encoding="utf-8")
    config = load_config(path)
    assert resolve_relay_config(config) == {"shallow_depth": 2, "deep_depth": 5}


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


def test_load_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_relay_section_must_be_mapping():
    assert relay_section({"deep_depth": 4}) == {"deep_depth": 4}
    assert relay_section({"relay": {"deep_depth": 4}}) == {"deep_depth": 4}
    with pytest.raises(ValueError):
        relay_section({"relay": 3})
    with pytest.raises(ValueError):
        resolve_relay_config({"relay": [1, 2]})
