from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .domain import RecipeDescriptor
from .errors import MissingFileError
from .paths import resolve_recipe_paths


@dataclass(frozen=True)
class RecipeContent:
    descriptor: RecipeDescriptor
    smart_contract_code: str
    smart_contract_explanation: str
    transaction_code: str
    transaction_explanation: str


def load_recipe_content(descriptor: RecipeDescriptor, content_root: Path) -> RecipeContent:
    paths = resolve_recipe_paths(descriptor, content_root)
    return RecipeContent(
        descriptor=descriptor,
        smart_contract_code=read_content_file(paths.smart_contract_code),
        smart_contract_explanation=read_content_file(paths.smart_contract_explanation),
        transaction_code=read_content_file(paths.transaction_code),
        transaction_explanation=read_content_file(paths.transaction_explanation),
    )


def read_content_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"Recipe file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise MissingFileError(f"Recipe file is not valid UTF-8: {path}") from exc
