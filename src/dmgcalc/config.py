"""User settings persistence."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DMGCALC_CONFIG"
DEFAULT_LUCK_MESSAGE = "Lucky strike!"
DEFAULT_LEADERSHIP_MESSAGE = "The stack rallies behind its leader!"
_DEFAULT_UNITS_COUNT = 7


@dataclass(slots=True)
class CalcSettings:
    """Settings shared by the resolver and the roster host."""

    luck_message: str = DEFAULT_LUCK_MESSAGE
    leadership_message: str = DEFAULT_LEADERSHIP_MESSAGE
    units_count: int = _DEFAULT_UNITS_COUNT
    can_kill_yourself: bool = False


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "dmgcalc"
        return Path.home() / "dmgcalc"
    return Path.home() / ".config" / "dmgcalc"


def get_default_config_path() -> Path:
    """Return the config path, honouring the DMGCALC_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return get_user_data_dir() / "config.json"


def _normalize(raw: dict) -> CalcSettings:
    defaults = CalcSettings()
    luck_message = raw.get("luck_message")
    leadership_message = raw.get("leadership_message")
    units_count = raw.get("units_count")
    can_kill_yourself = raw.get("can_kill_yourself")
    return CalcSettings(
        luck_message=luck_message if isinstance(luck_message, str) else defaults.luck_message,
        leadership_message=(
            leadership_message if isinstance(leadership_message, str) else defaults.leadership_message
        ),
        units_count=(
            units_count
            if isinstance(units_count, int) and not isinstance(units_count, bool) and units_count >= 0
            else defaults.units_count
        ),
        can_kill_yourself=can_kill_yourself if isinstance(can_kill_yourself, bool) else defaults.can_kill_yourself,
    )


def load_config(path: Path | None = None) -> CalcSettings:
    """Load settings from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return CalcSettings()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return CalcSettings()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_path)
        return CalcSettings()
    return _normalize(raw)


def save_config(settings: CalcSettings, path: Path | None = None) -> None:
    """Persist settings to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(settings)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False), encoding="utf-8")
