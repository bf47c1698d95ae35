from __future__ import annotations

from pathlib import Path

from .catalog import Catalog
from .domain import RecipeDescriptor, validate_slug
from .errors import MissingFileError
from .paths import resolve_recipe_paths


def missing_files(descriptor: RecipeDescriptor, content_root: Path) -> list[Path]:
    paths = resolve_recipe_paths(descriptor, content_root)
    return [path for path in paths.files() if not path.is_file()]


def check_recipe(descriptor: RecipeDescriptor, content_root: Path) -> None:
    missing = missing_files(descriptor, content_root)
    if missing:
        listed = ", ".join(str(path) for path in missing)
        raise MissingFileError(f"{descriptor.slug}: missing recipe files: {listed}")


def check_catalog(catalog: Catalog, content_root: Path) -> dict[str, list[Path]]:
    problems: dict[str, list[Path]] = {}
    for recipe in catalog:
        missing = missing_files(recipe, content_root)
        if missing:
            problems[recipe.slug] = missing
    return problems


__all__ = ["validate_slug", "missing_files", "check_recipe", "check_catalog"]
