from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .domain import RecipeDescriptor
from .errors import DuplicateRecipeError, UnknownRecipeError
from .recipes import ALL_RECIPES


@dataclass(frozen=True)
class Catalog:
    entries: Mapping[str, RecipeDescriptor]

    def get(self, slug: str) -> RecipeDescriptor:
        try:
            return self.entries[slug]
        except KeyError as exc:
            raise UnknownRecipeError(f"Unknown recipe: {slug}") from exc

    def slugs(self) -> list[str]:
        return list(self.entries)

    def recipes(self) -> list[RecipeDescriptor]:
        return list(self.entries.values())

    def __contains__(self, slug: object) -> bool:
        return slug in self.entries

    def __iter__(self) -> Iterator[RecipeDescriptor]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)


def build_catalog(recipes: Iterable[RecipeDescriptor]) -> Catalog:
    entries: dict[str, RecipeDescriptor] = {}
    for recipe in recipes:
        if recipe.slug in entries:
            raise DuplicateRecipeError(f"Duplicate recipe slug: {recipe.slug}")
        entries[recipe.slug] = recipe
    return Catalog(entries=MappingProxyType(entries))


def default_catalog() -> Catalog:
    return build_catalog(ALL_RECIPES)


def filter_recipes(
    catalog: Catalog,
    author: str | None = None,
    query: str | None = None,
) -> list[RecipeDescriptor]:
    matches: list[RecipeDescriptor] = []
    needle = query.lower() if query else None
    for recipe in catalog:
        if author and recipe.author.lower() != author.lower():
            continue
        if needle and needle not in recipe.title.lower() and needle not in recipe.excerpt.lower():
            continue
        matches.append(recipe)
    return matches
