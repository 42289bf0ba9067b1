"""Interactive menu for viewing and editing the inventory."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO

from hospitalms.inventory import InventoryManager

HOME_TEXT = (
    "Please select the number option from the following. Type your number choice.\n\n"
    "1. Add Item\n"
    "2. Modify Inventory Item\n"
    "3. View Inventory List\n"
    "4. Exit\n"
)
MODIFY_TEXT = (
    "\n\nWhat would you like to modify? Type your number choice.\n"
    "1. Item Count\n"
    "2. Item Threshold\n"
    "3. Both Item Count and Item Threshold\n"
    "4. Exit\n"
)


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


class _Input:
    """Reads single characters and words from a stream, skipping whitespace."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buffer = line

    def char(self) -> str:
        self._fill()
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def word(self) -> str:
        self._fill()
        match = re.match(r"\S+", self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group(0)


class InventoryMenu:
    """Text menu to add items, change counts and thresholds, and list stock."""

    def __init__(
        self,
        manager: InventoryManager | None = None,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.manager = manager if manager is not None else InventoryManager(out=self.out)
        self._input = _Input(stdin if stdin is not None else sys.stdin)

    def _write(self, text: str) -> None:
        self.out.write(text)

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        state = "H"
        try:
            while True:
                if state == "H":
                    self._write(HOME_TEXT)
                    state = self._input.char()
                elif state == "1":
                    self._add_item()
                    state = "H"
                elif state == "2":
                    state = self._modify_item()
                elif state == "3":
                    self._write(self.manager.format_inventory())
                    state = "H"
                elif state == "4":
                    self._write("You are now exiting the menu\n")
                    return
                else:
                    self._write("Invalid selection, please try agian\n\n")
                    state = "H"
        except EOFError:
            return

    def _add_item(self) -> None:
        self._write("Enter item info\nItem name : \t")
        name = self._input.word()
        self._write("\nItem quantity : \t")
        counts = self._input.word()
        self._write("\nItem threshold : \t")
        thresh = self._input.word()
        self.manager.add_item(name, _leading_int(counts), _leading_int(thresh))

    def _pick_item(self) -> str | None:
        self._write("Type the name of the item you would like to change\n\n")
        self._write(self.manager.format_inventory())
        name = self._input.word()
        if self.manager.store.contains(name):
            return name
        self._write("\nItem invalid. Please try again.")
        return None

    def _ask_int(self, prompt: str) -> int:
        self._write(prompt)
        return _leading_int(self._input.word())

    def _modify_item(self) -> str:
        self._write(MODIFY_TEXT)
        selection = self._input.char()
        actions: dict[str, Callable[[str], None]] = {
            "1": lambda name: self.manager.modify_count(
                name, self._ask_int("\nNew Item Counts : \t")
            ),
            "2": lambda name: self.manager.modify_threshold(
                name, self._ask_int("\nNew Item Threshold : \t")
            ),
            "3": self._modify_both,
        }
        if selection == "4":
            return "H"
        action = actions.get(selection)
        if action is None:
            self._write("\nOption not valid. Please try again\n")
            return "2"
        name = self._pick_item()
        if name is not None:
            action(name)
        return "2"

    def _modify_both(self, name: str) -> None:
        count = self._ask_int("\nNew Item Counts : \t")
        threshold = self._ask_int("\nNew Item Threshold : \t")
        self.manager.modify_both(name, count, threshold)