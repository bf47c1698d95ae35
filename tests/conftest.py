from __future__ import annotations

from pathlib import Path
import sys
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

TOPSHOT_FILES = {
    "create-a-topshot-set/cadence/contract.cdc": "import TopShot from 0x01\n",
    "create-a-topshot-set/cadence/transaction.cdc": "transaction(setName: String) {}\n",
    "create-a-topshot-set/explanations/contract.txt": "Sets group plays.\n",
    "create-a-topshot-set/explanations/transaction.txt": "The admin creates a set.\n",
}


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture()
def content_root(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    for rel, text in TOPSHOT_FILES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root
