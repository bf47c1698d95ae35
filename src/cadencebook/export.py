from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

import yaml

from .domain import RecipeDescriptor
from .errors import ConfigError


WIRE_KEYS: dict[str, str] = {
    "slug": "slug",
    "title": "title",
    "created_at": "createdAt",
    "author": "author",
    "playground_link": "playgroundLink",
    "excerpt": "excerpt",
    "smart_contract_code": "smartContractCode",
    "smart_contract_explanation": "smartContractExplanation",
    "transaction_code": "transactionCode",
    "transaction_explanation": "transactionExplanation",
}


def descriptor_to_dict(descriptor: RecipeDescriptor) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for attr, key in WIRE_KEYS.items():
        value = getattr(descriptor, attr)
        if attr == "created_at":
            value = value.isoformat()
        out[key] = value
    return out


def catalog_to_json(recipes: Iterable[RecipeDescriptor]) -> str:
    return json.dumps([descriptor_to_dict(r) for r in recipes], indent=2) + "\n"


def catalog_to_yaml(recipes: Iterable[RecipeDescriptor]) -> str:
    return yaml.safe_dump(
        [descriptor_to_dict(r) for r in recipes],
        sort_keys=False,
        allow_unicode=True,
    )


def export_catalog(recipes: Iterable[RecipeDescriptor], fmt: str) -> str:
    if fmt == "json":
        return catalog_to_json(recipes)
    if fmt == "yaml":
        return catalog_to_yaml(recipes)
    raise ConfigError(f"Unsupported export format: {fmt}")
