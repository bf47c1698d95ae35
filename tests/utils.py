from __future__ import annotations

from pathlib import Path


def write_global_config(home: Path, content: str) -> Path:
    path = home / ".config" / "cadencebook" / "config.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_project_config(project: Path, content: str) -> Path:
    project.mkdir(parents=True, exist_ok=True)
    path = project / "cadencebook.toml"
    path.write_text(content, encoding="utf-8")
    return path
