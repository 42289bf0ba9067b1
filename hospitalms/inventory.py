"""Inventory storage, stock changes and restocking orders."""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from hospitalms.entities import InventoryItem

DEFAULT_INVENTORY_PATH = Path("./database/inventory.txt")
ORDER_THRESHOLD = 500
_MAX_ORDER_NUMBER = 2**31 - 1


def _check_name(name: str) -> None:
    if not name or any(ch.isspace() for ch in name):
        raise ValueError(f"invalid item name: {name!r}")


def _check_quantity(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative: {value}")


class InventoryStore:
    """The inventory file: one tab-separated item per line."""

    def __init__(
        self, path: str | Path = DEFAULT_INVENTORY_PATH, out: TextIO | None = None
    ) -> None:
        self.path = Path(path)
        self.out = out

    def _write(self, message: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(message)

    def contains(self, name: str) -> bool:
        """Whether an item of this name is stored; reports a missing file."""
        if not self.path.exists():
            self._write("File does not exist\n\n")
            return False
        return any(item.name == name for item in self.load())

    def append(self, item: InventoryItem) -> None:
        """Add one item to the end of the file, creating the file if needed."""
        _check_name(item.name)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{item.name}\t{item.count}\t{item.threshold}\n")

    def load(self) -> list[InventoryItem]:
        """Return every stored item in file order; empty if there is no file."""
        try:
            with self.path.open(encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except FileNotFoundError:
            return []
        items = []
        for line in lines:
            if not line.strip():
                continue
            fields = line.split("\t")
            if len(fields) != 3:
                raise ValueError(f"malformed inventory line: {line!r}")
            name, count, threshold = fields
            items.append(InventoryItem(name, int(count), int(threshold)))
        return items

    def save(self, items: Iterable[InventoryItem]) -> None:
        """Replace the file's contents with the given items."""
        items = list(items)
        for item in items:
            _check_name(item.name)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            handle.writelines(
                f"{item.name}\t{item.count}\t{item.threshold}\n" for item in items
            )


class InventoryManager:
    """Adds items and changes counts and thresholds in an inventory store."""

    def __init__(self, store: InventoryStore | None = None, out: TextIO | None = None) -> None:
        self.store = store if store is not None else InventoryStore(out=out)
        self.out = out

    def _write(self, message: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(message)

    def add_item(self, name: str, count: int, threshold: int) -> bool:
        """Store a new item unless one of that name exists; return whether it was added."""
        _check_name(name)
        _check_quantity(count, "count")
        _check_quantity(threshold, "threshold")
        if self.store.contains(name):
            self._write("\nItem Already Exists\n\n")
            return False
        self.store.append(InventoryItem(name, count, threshold))
        self._write("\nItem Added Succesfully\n\n")
        return True

    def format_inventory(self) -> str:
        """Return the inventory listing, one item per paragraph."""
        return "".join(
            f"{item.name}\t\t{item.count}\t\t{item.threshold}\n\n"
            for item in self.store.load()
        )

    def _update(self, name: str, count: Optional[int], threshold: Optional[int]) -> int:
        items = self.store.load()
        changed = 0
        for item in items:
            if item.name == name:
                if count is not None:
                    item.count = count
                if threshold is not None:
                    item.threshold = threshold
                changed += 1
        self.store.save(items)
        return changed

    def modify_count(self, name: str, count: int) -> int:
        """Set the count of every item of this name; return how many changed."""
        _check_quantity(count, "count")
        return self._update(name, count, None)

    def modify_threshold(self, name: str, threshold: int) -> int:
        """Set the threshold of every item of this name; return how many changed."""
        _check_quantity(threshold, "threshold")
        return self._update(name, None, threshold)

    def modify_both(self, name: str, count: int, threshold: int) -> int:
        """Set count and threshold of every item of this name; return how many changed."""
        _check_quantity(count, "count")
        _check_quantity(threshold, "threshold")
        return self._update(name, count, threshold)


def place_order(
    items: Iterable[InventoryItem], rng: random.Random | None = None
) -> Optional[int]:
    """Order every item below the order threshold.

    Returns a random order number, or None when no item needs ordering.
    """
    to_order = [item for item in items if item.count < ORDER_THRESHOLD]
    if not to_order:
        return None
    generator = rng if rng is not None else random.Random()
    return generator.randint(0, _MAX_ORDER_NUMBER)