import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from knapsack import Item  # noqa: E402


@pytest.fixture()
def pen() -> Item:
    return Item("Pen", 15)


@pytest.fixture()
def letter() -> Item:
    return Item("Letter", 20)
