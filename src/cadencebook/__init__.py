from .catalog import Catalog, build_catalog, default_catalog
from .domain import RecipeDescriptor
from .recipes import ALL_RECIPES, CREATE_A_TOPSHOT_SET

__all__ = [
    "ALL_RECIPES",
    "CREATE_A_TOPSHOT_SET",
    "Catalog",
    "RecipeDescriptor",
    "build_catalog",
    "default_catalog",
]
