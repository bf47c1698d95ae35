from __future__ import annotations

import json

import pytest
import yaml

from cadencebook.errors import ConfigError
from cadencebook.export import catalog_to_json, catalog_to_yaml, descriptor_to_dict, export_catalog
from cadencebook.recipes import CREATE_A_TOPSHOT_SET


def test_descriptor_to_dict_wire_keys() -> None:
    data = descriptor_to_dict(CREATE_A_TOPSHOT_SET)
    assert list(data) == [
        "slug",
        "title",
        "createdAt",
        "author",
        "playgroundLink",
        "excerpt",
        "smartContractCode",
        "smartContractExplanation",
        "transactionCode",
        "transactionExplanation",
    ]
    assert data["createdAt"] == "2022-10-09"
    assert data["smartContractCode"] == "create-a-topshot-set/cadence/contract.cdc"


def test_catalog_to_json() -> None:
    data = json.loads(catalog_to_json([CREATE_A_TOPSHOT_SET]))
    assert data[0]["transactionExplanation"] == "create-a-topshot-set/explanations/transaction.txt"


def test_catalog_to_yaml() -> None:
    data = yaml.safe_load(catalog_to_yaml([CREATE_A_TOPSHOT_SET]))
    assert data[0]["slug"] == "create-a-topshot-set"
    assert data[0]["createdAt"] == "2022-10-09"


def test_export_catalog_dispatch() -> None:
    assert export_catalog([CREATE_A_TOPSHOT_SET], "json").startswith("[")
    assert export_catalog([CREATE_A_TOPSHOT_SET], "yaml").startswith("- slug:")
    with pytest.raises(ConfigError):
        export_catalog([CREATE_A_TOPSHOT_SET], "xml")
