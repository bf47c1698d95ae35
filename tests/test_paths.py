from __future__ import annotations

from pathlib import Path

from cadencebook.config import EffectiveConfig
from cadencebook.paths import resolve_content_root, resolve_recipe_paths
from cadencebook.recipes import CREATE_A_TOPSHOT_SET


def _cfg(content_root: str, project_dir: str) -> EffectiveConfig:
    return EffectiveConfig(
        content_root=content_root,
        export_format="json",
        project_dir=project_dir,
    )


def test_relative_content_root_uses_project(tmp_path: Path) -> None:
    assert resolve_content_root(_cfg("recipes", str(tmp_path))) == tmp_path / "recipes"


def test_absolute_content_root(tmp_path: Path) -> None:
    root = tmp_path / "elsewhere"
    assert resolve_content_root(_cfg(str(root), "/project")) == root


def test_resolve_recipe_paths(tmp_path: Path) -> None:
    paths = resolve_recipe_paths(CREATE_A_TOPSHOT_SET, tmp_path)
    assert paths.recipe_dir == tmp_path / "create-a-topshot-set"
    assert paths.smart_contract_code == tmp_path / "create-a-topshot-set" / "cadence" / "contract.cdc"
    assert paths.transaction_explanation == tmp_path / "create-a-topshot-set" / "explanations" / "transaction.txt"
    assert paths.files() == [
        tmp_path / "create-a-topshot-set/cadence/contract.cdc",
        tmp_path / "create-a-topshot-set/explanations/contract.txt",
        tmp_path / "create-a-topshot-set/cadence/transaction.cdc",
        tmp_path / "create-a-topshot-set/explanations/transaction.txt",
    ]
