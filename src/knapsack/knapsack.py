from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import InvalidItemError, InvalidItemsError
from .item import Item

logger = logging.getLogger(__name__)


class Knapsack:
    """
    A Knapsack holds zero or more Items and answers queries about them.

    - Items can be added over the lifetime of the knapsack; ``None`` entries are
      skipped at the boundary, so the stored list never contains ``None``.
    - The knapsack can be reset, filtered in place by a maximum item weight, or
      copied into a new knapsack holding only the lighter items.

    Not safe for concurrent mutation; callers sharing a knapsack across threads
    must serialize access themselves.
    """

    def __init__(self, items: Iterable[Optional[Item]] = ()) -> None:
        self._items: List[Item] = []
        self.add_all(items)

    # Modifiers

    def add(self, item: Optional[Item]) -> bool:
        """
        Append ``item`` to this knapsack.

        Returns False (and leaves the knapsack unchanged) when ``item`` is None,
        True otherwise. Raises InvalidItemError for anything that is not an Item.
        """
        if item is None:
            return False
        if not isinstance(item, Item):
            raise InvalidItemError(f"Cannot add non-item to knapsack: {item!r}")
        self._items.append(item)
        logger.debug("Added %s (count=%d)", item, len(self._items))
        return True

    def add_all(self, items: Iterable[Optional[Item]]) -> bool:
        """
        Add every non-None entry of ``items``; True if at least one was added.

        All entries are checked before any is stored, so a rejected entry
        leaves the knapsack unchanged.
        """
        if items is None:
            raise InvalidItemsError("items must not be None (it may contain None)")
        try:
            entries = list(items)
        except TypeError as e:
            raise InvalidItemsError(f"items must be iterable: {items!r}") from e
        for item in entries:
            if item is not None and not isinstance(item, Item):
                raise InvalidItemError(f"Cannot add non-item to knapsack: {item!r}")
        added = False
        for item in entries:
            if self.add(item):
                added = True
        return added

    def reset(self) -> None:
        self._items.clear()
        logger.debug("Knapsack reset")

    def keep_only_items_with(self, max_item_weight_in_grammes: int) -> None:
        """Drop, in place, every item heavier than ``max_item_weight_in_grammes``."""
        kept = [it for it in self._items if it.weight_in_grammes <= max_item_weight_in_grammes]
        removed = len(self._items) - len(kept)
        self._items = kept
        logger.debug(
            "Kept items up to %dg; removed %d, remaining=%d",
            max_item_weight_in_grammes,
            removed,
            len(kept),
        )

    # Accessors

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def number_of_items(self) -> int:
        return len(self._items)

    def total_weight_in_grammes(self) -> int:
        return sum(it.weight_in_grammes for it in self._items)

    def average_weight_in_grammes(self) -> float:
        """
        Average item weight in grammes, or -1.0 when the knapsack is empty.

        For example, with Item("Soda", 400) and Item("Water", 395) the result
        is 397.5.
        """
        if not self._items:
            return -1.0
        return self.total_weight_in_grammes() / len(self._items)

    def greatest_item(self) -> Optional[Item]:
        """
        Return an item of maximum weight, or None if the knapsack is empty.

        When several items share the maximum weight, which one is returned is
        not part of the contract.
        """
        if not self._items:
            return None
        greatest = self._items[0]
        for it in self._items[1:]:
            if greatest.compare_to(it) < 0:
                greatest = it
        return greatest

    def make_new_knapsack_with(self, max_item_weight_in_grammes: int) -> "Knapsack":
        """Return a new knapsack with the items weighing at most ``max_item_weight_in_grammes``."""
        return Knapsack(it for it in self._items if it.weight_in_grammes <= max_item_weight_in_grammes)

    # Static methods

    @staticmethod
    def heaviest_knapsack(knapsacks: Iterable[Optional["Knapsack"]]) -> Optional["Knapsack"]:
        """
        Return one of the knapsacks with the highest total weight.

        ``knapsacks`` may contain None entries, which are ignored. Returns None
        when there is no knapsack at all. Among knapsacks of equal total weight
        the choice is implementation specific.
        """
        if knapsacks is None:
            raise InvalidItemsError("knapsacks must not be None (it may contain None)")
        try:
            candidates = list(knapsacks)
        except TypeError as e:
            raise InvalidItemsError(f"knapsacks must be iterable: {knapsacks!r}") from e
        heaviest: Optional[Knapsack] = None
        heaviest_total = 0
        for k in candidates:
            if k is None:
                continue
            total = k.total_weight_in_grammes()
            if heaviest is None or total > heaviest_total:
                heaviest = k
                heaviest_total = total
        return heaviest

    # Python protocol

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __str__(self) -> str:
        return "[" + ", ".join(str(it) for it in self._items) + "]"

    def __repr__(self) -> str:
        return f"Knapsack(items={self._items!r})"
