import pytest

import config


@pytest.fixture(autouse=True)
def restore_config(monkeypatch):
    monkeypatch.setattr(config, "_config", {})


def test_load_default_config(monkeypatch):
    for name in ("THRESH_VOLUME_RATIO", "THRESH_MAX_PRICE_CHANGE", "THRESH_MIN_BUYER_SELLER"):
        monkeypatch.delenv(name, raising=False)
    cfg = config.load_config()
    assert cfg["screener"]["thresholds"] == {
        "volume_ratio": 2,
        "max_price_change_percent": 2,
        "min_buyer_seller_ratio": 3,
    }
    assert config.get_symbols_cfg()["markers"] == ["ح"]


def test_env_substitution(tmp_path, monkeypatch):
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text(
        "screener:\n"
        "  thresholds:\n"
        "    volume_ratio: ${THRESH_VOLUME_RATIO}\n"
        "    max_price_change_percent: 4\n"
    )
    monkeypatch.setenv("THRESH_VOLUME_RATIO", "1.5")
    config.load_config(cfg_path)
    assert config.get_thresholds() == {"volume_ratio": 1.5, "max_price_change_percent": 4}


def test_missing_env_var(tmp_path, monkeypatch):
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text("screener:\n  thresholds:\n    volume_ratio: ${THRESH_MISSING}\n")
    monkeypatch.delenv("THRESH_MISSING", raising=False)
    with pytest.raises(ValueError):
        config.load_config(cfg_path)


def test_reload_config(tmp_path):
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text("screener:\n  thresholds:\n    min_buyer_seller_ratio: 5\n")
    assert config.get_thresholds()["min_buyer_seller_ratio"] == 3
    config.reload_config(cfg_path)
    assert config.get_thresholds() == {"min_buyer_seller_ratio": 5}
    assert config.get_symbols_cfg() == {}


def test_default_config_ships_with_package():
    assert config._CONFIG_PATH.parent.name == "screener"
    assert config._CONFIG_PATH.is_file()


def test_threshold_env_override(monkeypatch):
    monkeypatch.setenv("THRESH_MIN_BUYER_SELLER", "4.5")
    monkeypatch.delenv("THRESH_VOLUME_RATIO", raising=False)
    thresholds = config.get_thresholds()
    assert thresholds["min_buyer_seller_ratio"] == 4.5
    assert thresholds["volume_ratio"] == 2
