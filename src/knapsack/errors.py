class KnapsackError(Exception):
    """Base error for knapsack domain exceptions."""


class InvalidItemsError(KnapsackError, TypeError):
    """Raised when a collection of items (or knapsacks) is itself missing."""


class InvalidItemError(KnapsackError, TypeError):
    """Raised when something other than an Item (or None) is added to a knapsack."""


class SettingsError(KnapsackError, ValueError):
    """Raised when a settings file cannot be parsed or fails validation."""
