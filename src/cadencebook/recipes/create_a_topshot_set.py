from __future__ import annotations

from datetime import date

from ..domain import RecipeDescriptor


RECIPE = "create-a-topshot-set"

CREATE_A_TOPSHOT_SET = RecipeDescriptor(
    slug=RECIPE,
    title="Create a TopShot Set",
    created_at=date(2022, 10, 9),
    author="Flow Blockchain",
    playground_link=(
        "https://play.onflow.org/63a7ce9f-3315-4c55-8392-2d626bb8387d"
        "?type=account&id=91c4010c-2407-4a3c-a0c1-cc4d3904d9f8&storage=none"
    ),
    excerpt=(
        "Using the TopShot contract, this is how you would create a set so that you "
        "could add plays to them and mint moments from those plays."
    ),
)
