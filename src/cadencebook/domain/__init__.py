from .models import (
    PATH_TEMPLATES,
    RecipeDescriptor,
    build_recipe_paths,
)
from .slug import SLUG_RE, slug_to_identifier, validate_slug

__all__ = [
    "PATH_TEMPLATES",
    "RecipeDescriptor",
    "SLUG_RE",
    "build_recipe_paths",
    "slug_to_identifier",
    "validate_slug",
]
