from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import EffectiveConfig
from .domain import RecipeDescriptor


@dataclass(frozen=True)
class RecipePaths:
    recipe_dir: Path
    smart_contract_code: Path
    smart_contract_explanation: Path
    transaction_code: Path
    transaction_explanation: Path

    def files(self) -> list[Path]:
        return [
            self.smart_contract_code,
            self.smart_contract_explanation,
            self.transaction_code,
            self.transaction_explanation,
        ]


def resolve_content_root(cfg: EffectiveConfig) -> Path:
    root = Path(cfg.content_root).expanduser()
    if root.is_absolute():
        return root
    return Path(cfg.project_dir) / root


def resolve_recipe_paths(descriptor: RecipeDescriptor, content_root: Path) -> RecipePaths:
    root = Path(content_root)
    return RecipePaths(
        recipe_dir=root / descriptor.slug,
        smart_contract_code=root / descriptor.smart_contract_code,
        smart_contract_explanation=root / descriptor.smart_contract_explanation,
        transaction_code=root / descriptor.transaction_code,
        transaction_explanation=root / descriptor.transaction_explanation,
    )
