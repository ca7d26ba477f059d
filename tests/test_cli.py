import json
from pathlib import Path

from dmgcalc.presentation.cli import app


def _write_classes(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "classes.json"
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def _classes() -> dict:
    return {
        "Archer": {"attack": 5, "min_dmg": 3, "max_dmg": 3, "defence": 2, "health": 10, "description": ""},
        "Goblin": {"attack": 2, "min_dmg": 2, "max_dmg": 2, "defence": 1, "health": 8, "description": ""},
    }


def _run(tmp_path: Path, *args: str) -> int:
    return app.main([*args, "--config", str(tmp_path / "settings.json")])


def test_cli_prints_strike_and_remaining_stack(tmp_path: Path, capsys) -> None:
    classes = _write_classes(tmp_path, _classes())

    code = _run(tmp_path, str(classes), "Archer", "Goblin", "--attackers", "10", "--defenders", "10", "--seed", "1")

    out = capsys.readouterr().out
    assert code == 0
    assert "Archer -> Goblin: 36 damage" in out
    assert "Goblin: 6 left, top creature 4/8" in out


def test_cli_retaliation_reports_both_sides(tmp_path: Path, capsys) -> None:
    classes = _write_classes(tmp_path, _classes())

    code = _run(
        tmp_path, str(classes), "Archer", "Goblin", "--attackers", "10", "--defenders", "10", "--retaliation"
    )

    out = capsys.readouterr().out
    assert code == 0
    # 6 surviving goblins hit back: 2 * 6 = 12 against a 100 health pool
    assert "Goblin -> Archer: 12 damage" in out
    assert "Archer: 9 left, top creature 8/10" in out


def test_cli_warns_about_skipped_entries(tmp_path: Path, capsys) -> None:
    payload = _classes()
    payload["Broken"] = {"attack": 1}
    classes = _write_classes(tmp_path, payload)

    code = _run(tmp_path, str(classes), "Archer", "Goblin")

    assert code == 0
    assert "skipped 1 malformed" in capsys.readouterr().out


def test_cli_rejects_unknown_class(tmp_path: Path, capsys) -> None:
    classes = _write_classes(tmp_path, _classes())

    code = _run(tmp_path, str(classes), "Archer", "Dragon")

    assert code == 1
    assert "Unknown unit class 'Dragon'" in capsys.readouterr().err


def test_cli_rejects_non_object_table(tmp_path: Path, capsys) -> None:
    classes = _write_classes(tmp_path, ["Archer"])

    assert _run(tmp_path, str(classes), "Archer", "Goblin") == 1
    assert "not a JSON object" in capsys.readouterr().err


def test_cli_reports_missing_file(tmp_path: Path, capsys) -> None:
    assert _run(tmp_path, str(tmp_path / "nope.json"), "Archer", "Goblin") == 1
    assert "not found" in capsys.readouterr().err


def test_cli_uses_configured_messages(tmp_path: Path, capsys) -> None:
    payload = _classes()
    payload["Archer"]["luck"] = 100
    classes = _write_classes(tmp_path, payload)
    (tmp_path / "settings.json").write_text(json.dumps({"luck_message": "Fortune!"}), encoding="utf-8")

    assert _run(tmp_path, str(classes), "Archer", "Goblin") == 0
    assert "  Fortune!" in capsys.readouterr().out
