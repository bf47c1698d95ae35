from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .slug import validate_slug


CONTRACT_CODE_TEMPLATE = "{slug}/cadence/contract.cdc"
TRANSACTION_CODE_TEMPLATE = "{slug}/cadence/transaction.cdc"
CONTRACT_EXPLANATION_TEMPLATE = "{slug}/explanations/contract.txt"
TRANSACTION_EXPLANATION_TEMPLATE = "{slug}/explanations/transaction.txt"

PATH_TEMPLATES: dict[str, str] = {
    "smart_contract_code": CONTRACT_CODE_TEMPLATE,
    "smart_contract_explanation": CONTRACT_EXPLANATION_TEMPLATE,
    "transaction_code": TRANSACTION_CODE_TEMPLATE,
    "transaction_explanation": TRANSACTION_EXPLANATION_TEMPLATE,
}


def build_recipe_paths(slug: str) -> dict[str, str]:
    validate_slug(slug)
    return {name: template.format(slug=slug) for name, template in PATH_TEMPLATES.items()}


@dataclass(frozen=True)
class RecipeDescriptor:
    """Catalog entry pairing Cadence samples with their explanations.

    The four path fields are derived from ``slug`` and cannot be passed in.
    """

    slug: str
    title: str
    created_at: date
    author: str
    playground_link: str
    excerpt: str
    smart_contract_code: str = field(init=False)
    smart_contract_explanation: str = field(init=False)
    transaction_code: str = field(init=False)
    transaction_explanation: str = field(init=False)

    def __post_init__(self) -> None:
        # frozen, so derived fields go through object.__setattr__
        for name, value in build_recipe_paths(self.slug).items():
            object.__setattr__(self, name, value)

    def code_paths(self) -> tuple[str, str]:
        return (self.smart_contract_code, self.transaction_code)

    def explanation_paths(self) -> tuple[str, str]:
        return (self.smart_contract_explanation, self.transaction_explanation)

    def file_paths(self) -> tuple[str, ...]:
        return tuple(getattr(self, name) for name in PATH_TEMPLATES)
