import json
from pathlib import Path

from dmgcalc import config
from dmgcalc.config import CalcSettings, load_config, save_config


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == CalcSettings()


def test_save_then_load_preserves_settings(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    settings = CalcSettings(luck_message="Повезло!", leadership_message="Rally!", units_count=3, can_kill_yourself=True)

    save_config(settings, path)

    assert load_config(path) == settings
    assert json.loads(path.read_text(encoding="utf-8"))["luck_message"] == "Повезло!"


def test_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")

    assert load_config(path) == CalcSettings()


def test_non_object_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert load_config(path) == CalcSettings()


def test_wrong_field_types_fall_back_per_field(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"luck_message": 5, "leadership_message": "Go!", "units_count": True, "can_kill_yourself": "yes"}),
        encoding="utf-8",
    )

    settings = load_config(path)

    assert settings.luck_message == CalcSettings().luck_message
    assert settings.leadership_message == "Go!"
    assert settings.units_count == CalcSettings().units_count
    assert settings.can_kill_yourself is False


def test_env_var_overrides_default_path(monkeypatch, tmp_path: Path) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(target))

    assert config.get_default_config_path() == target


def test_default_path_under_user_config_dir(monkeypatch) -> None:
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)

    path = config.get_default_config_path()

    assert path.name == "config.json"
    assert path.parent == config.get_user_data_dir()
