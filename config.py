import os
import re
import yaml
from typing import Dict, Any
from pathlib import Path

_CONFIG_PATH = Path(__file__).with_name('screener') / 'config.yaml'
_config: Dict[str, Any] = {}


def load_config(path: Path | str | None = None) -> Dict[str, Any]:
    """Load configuration from YAML file using environment variables.

    ``${NAME}`` must be set; ``${NAME:-default}`` falls back to ``default``.
    """
    global _config
    cfg_path = Path(path) if path else _CONFIG_PATH
    text = cfg_path.read_text(encoding='utf-8')
    text = os.path.expandvars(text)

    def replace_var(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        val = os.getenv(name, default)
        if val is None:
            raise ValueError(f"Environment variable '{name}' is not set")
        return val

    text = re.sub(r"\$\{(\w+)(?::-([^}]*))?\}", replace_var, text)
    _config = yaml.safe_load(text) or {}
    return _config


def get_thresholds() -> Dict[str, float]:
    """Return breakout screening thresholds."""
    if not _config:
        load_config()
    return _config.get('screener', {}).get('thresholds', {})


def get_symbols_cfg() -> Dict[str, Any]:
    """Return instrument classification settings."""
    if not _config:
        load_config()
    return _config.get('symbols', {})


def reload_config(path: Path | str | None = None) -> Dict[str, Any]:
    """Reload configuration at runtime."""
    return load_config(path)
