from .create_a_topshot_set import CREATE_A_TOPSHOT_SET

ALL_RECIPES = (CREATE_A_TOPSHOT_SET,)

__all__ = ["ALL_RECIPES", "CREATE_A_TOPSHOT_SET"]
