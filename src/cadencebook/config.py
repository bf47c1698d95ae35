from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any

from .errors import ConfigError


CONFIG_FILENAME = "cadencebook.toml"
EXPORT_FORMATS = ("json", "yaml")
KNOWN_KEYS = ("content_root", "export_format")


@dataclass(frozen=True)
class EffectiveConfig:
    content_root: str
    export_format: str
    project_dir: str


def global_config_path() -> Path:
    return Path(os.path.expanduser("~/.config/cadencebook")) / "config.toml"


def read_config_layer(path: Path) -> dict[str, Any]:
    """Settings from one TOML file, or nothing when the file is absent."""
    if not path.exists():
        return {}
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc

    layer = {key: data[key] for key in KNOWN_KEYS if key in data}
    for key, value in layer.items():
        if not isinstance(value, str):
            raise ConfigError(f"{path}: {key} must be a string")
    return layer


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    project_dir = str(cli_args.get("project") or os.getcwd())

    settings: dict[str, Any] = {"content_root": "recipes", "export_format": "json"}
    settings.update(read_config_layer(global_config_path()))
    settings.update(read_config_layer(Path(project_dir) / CONFIG_FILENAME))
    settings.update({key: cli_args[key] for key in KNOWN_KEYS if cli_args.get(key) is not None})

    return EffectiveConfig(
        content_root=str(settings["content_root"]),
        export_format=_normalize_export_format(settings["export_format"]),
        project_dir=project_dir,
    )


def config_to_toml(cfg: EffectiveConfig) -> str:
    return f"content_root = {cfg.content_root!r}\nexport_format = {cfg.export_format!r}\n"


def _normalize_export_format(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in EXPORT_FORMATS:
        return text
    return "json"
