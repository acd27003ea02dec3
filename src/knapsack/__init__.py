"""
Knapsack package root.

Provides an in-memory collection of weighted, named items:
- Item: immutable value ordered by weight
- Knapsack: owning container with filtering and aggregate queries
- Settings and logging helpers for applications embedding the library
"""
from .errors import InvalidItemError, InvalidItemsError, KnapsackError, SettingsError
from .item import Item
from .knapsack import Knapsack
from .logging_config import configure_logging
from .settings import KnapsackSettings, load_settings

__all__ = [
    "Item",
    "Knapsack",
    "KnapsackSettings",
    "load_settings",
    "configure_logging",
    "KnapsackError",
    "InvalidItemsError",
    "InvalidItemError",
    "SettingsError",
]
