from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=True, frozen=True)
class Item:
    """Immutable weighted item.

    Items order naturally by weight (lightest first). Equality still compares
    both fields, so two items of the same weight but different names are
    neither smaller nor greater than each other without being equal.
    No validation is applied: zero or negative weights are kept as given.
    """

    name: str
    weight_in_grammes: int

    def compare_to(self, other: "Item") -> int:
        """Return -1, 0 or 1 as this item is lighter, as heavy, or heavier than ``other``."""
        if self.weight_in_grammes < other.weight_in_grammes:
            return -1
        if self.weight_in_grammes > other.weight_in_grammes:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.weight_in_grammes < other.weight_in_grammes

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.weight_in_grammes <= other.weight_in_grammes

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.weight_in_grammes > other.weight_in_grammes

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.weight_in_grammes >= other.weight_in_grammes

    def __str__(self) -> str:
        return f"({self.name}, {self.weight_in_grammes}g)"
