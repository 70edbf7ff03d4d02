import json
import pytest
from geometry.errors import ConfigError
from mesh.config import DEFAULTS, load_config, merge_config, validate_config


def test_defaults():
    cfg = load_config()
    assert cfg == DEFAULTS
    assert cfg is not DEFAULTS
    assert cfg["thin"]["min_distance"] == 10.0
    assert cfg["regions"]["seed"] == 0


def test_merge_is_deep_and_does_not_mutate_defaults():
    cfg = merge_config({"thin": {"negate": True}})
    assert cfg["thin"]["negate"] is True
    assert cfg["thin"]["min_distance"] == 10.0
    assert DEFAULTS["thin"]["negate"] is False


@pytest.mark.parametrize("overrides", [
    {"mesh": {}},
    {"thin": {"distance": 3}},
    {"thin": {"min_distance": -1}},
    {"thin": {"border": "wide"}},
    {"thin": {"negate": 1}},
    {"regions": {"seed": -5}},
    {"regions": {"seed": True}},
    {"regions": {"max_iterations": 0}},
    {"amalgamate": {"debug": "yes"}},
    {"logging": {"level": "LOUD"}},
    {"logging": "INFO"},
])
def test_invalid_overrides(overrides):
    with pytest.raises(ConfigError):
        merge_config(overrides)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        validate_config({"nope": {}})


def test_seed_may_be_null():
    assert merge_config({"regions": {"seed": None}})["regions"]["seed"] is None


def test_load_config_from_file(tmp_path):
    path = tmp_path / "tools.json"
    path.write_text(json.dumps({"logging": {"level": "debug"}, "regions": {"seed": 4}}),
                    encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg["logging"]["level"] == "debug"
    assert cfg["regions"]["seed"] == 4
    assert cfg["regions"]["max_iterations"] == 10000


def test_load_config_rejects_bad_files(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError) as info:
        load_config(str(broken))
    assert "broken.json" in str(info.value)

    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(listing))
