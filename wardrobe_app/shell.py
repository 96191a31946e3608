"""Interactive text shell over a :class:`WardrobeManagerApp`."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from pydantic import ValidationError

from models.clothing_item import ClothingItem, Outfit
from models.errors import DuplicateItemError, ItemNotFoundError, WardrobeFileError
from models.taxonomy import ITEM_TYPES, STYLES, validate_style
from models.wardrobe import LoadResult, LoadStatus
from wardrobe_app.app import WardrobeManagerApp
from wardrobe_app.logging_config import operation_context

BANNER = [
    "******---------------------------------------------------******",
    "**           Welcome to your Wardrobe Manager!               **",
    "** COMMANDS                                                  **",
    "** add: add a clothing item to your wardrobe                 **",
    "** remove: remove a clothing item from your wardrobe         **",
    "** list: show all items in your wardrobe                     **",
    "** category: show all items in a style or type category      **",
    "** outfit: suggest a random outfit for a style               **",
    "** save: save wardrobe to file                               **",
    "** load: load wardrobe from file                             **",
    "** help: show this message                                   **",
    "** exit: exit your wardrobe                                  **",
    "**-----------------------------------------------------------**",
]


def format_item(item: ClothingItem) -> str:
    return (
        f"- ID: {item.id} | Name: {item.name} | Type: {item.item_type} "
        f"| Color: {item.color} | Style: {item.style}"
    )


def format_outfit(outfit: Outfit) -> List[str]:
    lines = []
    for slot, item in outfit.slots().items():
        lines.append(f"{slot}: {format_item(item)[2:] if item else '(none)'}")
    return lines


def _validation_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "input"
    return f"Invalid {field}: {error['msg']}"


class WardrobeShell:
    """Prompt loop reading commands until ``exit`` or end of input.

    ``input_func`` and ``output`` default to the console and are injectable
    for tests.
    """

    def __init__(
        self,
        app: WardrobeManagerApp,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.app = app
        self.input_func = input_func
        self.output = output
        self.commands: Dict[str, Callable[[List[str]], bool]] = {
            "add": self.do_add,
            "remove": self.do_remove,
            "list": self.do_list,
            "category": self.do_category,
            "outfit": self.do_outfit,
            "save": self.do_save,
            "load": self.do_load,
            "help": self.do_help,
            "exit": self.do_exit,
        }

    def run(self, autoload: bool = False) -> None:
        self.do_help([])
        if autoload:
            with operation_context("autoload"):
                self.do_load([])
        while True:
            line = self._ask("** Enter command >> ")
            if line is None:
                self.do_exit([])
                return
            if not self.handle_line(line):
                return

    def handle_line(self, line: str) -> bool:
        """Dispatch one command line; return ``False`` when the shell should stop."""

        parts = line.strip().split()
        if not parts:
            return True
        command = parts[0].lower()
        handler = self.commands.get(command)
        if handler is None:
            self.output(f"Unrecognized command: {command}.")
            self.output(f"You must type a valid command ({' | '.join(self.commands)})")
            return True
        with operation_context(f"shell:{command}"):
            return handler(parts[1:])

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self.input_func(prompt)
        except EOFError:
            return None

    def do_help(self, _: List[str]) -> bool:
        for line in BANNER:
            self.output(line)
        return True

    def do_add(self, _: List[str]) -> bool:
        answers = {}
        for key, prompt in (
            ("name", "** Enter item name: "),
            ("itemType", f"** Enter item type ({' | '.join(ITEM_TYPES)}): "),
            ("color", "** Enter item color: "),
            ("style", f"** Enter item style ({' | '.join(STYLES)}): "),
        ):
            answer = self._ask(prompt)
            if answer is None:
                return False
            answers[key] = answer

        try:
            item_id = self.app.add_item_from_input(answers)
        except ValidationError as exc:
            self.output(f"{_validation_message(exc)}. Please try again.")
            return True
        except DuplicateItemError:
            self.output("Error: That item ID already exists, cannot add duplicate.")
            return True
        self.output(f"** Added item: {answers['name'].strip()} id:{item_id}")
        return True

    def do_remove(self, args: List[str]) -> bool:
        raw = args[0] if args else self._ask("** Enter id of item you want to remove: ")
        if raw is None:
            return False
        try:
            item_id = int(raw.strip())
        except ValueError:
            self.output("Invalid ID entered; please enter a numeric ID.")
            return True

        try:
            removed = self.app.remove_item(item_id)
        except ItemNotFoundError:
            self.output(f"Error: No item found with id {item_id}.")
            return True
        self.output(f"** Removed item with id: {removed}")
        return True

    def do_list(self, _: List[str]) -> bool:
        self._print_items(self.app.list_items(), header="Items in wardrobe:")
        return True

    def do_category(self, args: List[str]) -> bool:
        name = args[0] if args else self._ask(
            f"** Enter category ({' | '.join(STYLES + ITEM_TYPES)}): "
        )
        if name is None:
            return False
        name = name.strip().lower()
        items = self.app.items_in_category(name)
        if not items:
            self.output(f"No items in category '{name}'.")
            return True
        self._print_items(items, header=f"Items in category '{name}':")
        return True

    def do_outfit(self, args: List[str]) -> bool:
        raw = args[0] if args else self._ask(f"** Enter style ({' | '.join(STYLES)}): ")
        if raw is None:
            return False
        try:
            style = validate_style(raw)
        except ValueError:
            self.output("Invalid style. Please try again.")
            return True

        outfit = self.app.suggest_outfit(style)
        if outfit.is_empty:
            self.output(f"No {style} items to build an outfit from.")
            return True
        self.output(f"Suggested {style} outfit:")
        for line in format_outfit(outfit):
            self.output(line)
        return True

    def do_save(self, _: List[str]) -> bool:
        try:
            path = self.app.save()
        except WardrobeFileError as exc:
            self.output(f"Error saving wardrobe: {exc.reason}")
            return True
        self.output(f"** Wardrobe saved to '{path}'.")
        return True

    def do_load(self, _: List[str]) -> bool:
        try:
            result = self.app.load()
        except WardrobeFileError as exc:
            self.output(f"Error loading wardrobe: {exc.reason}")
            return True
        self._report_load(result)
        return True

    def do_exit(self, _: List[str]) -> bool:
        self.output("** Exiting Wardrobe Manager. Thank you!                      **")
        self.output("**-----------------------------------------------------------**")
        return False

    def _report_load(self, result: LoadResult) -> None:
        if result.status is LoadStatus.MISSING:
            self.output(f"No existing file at '{result.path}', starting with empty wardrobe.")
            return
        self.output(f"** Wardrobe loaded from '{result.path}' ({result.item_count} items).")
        if result.unindexed_ids:
            ids = ", ".join(str(item_id) for item_id in result.unindexed_ids)
            self.output(f"Warning: items {ids} have an unknown style or type and are hidden from categories.")

    def _print_items(self, items: List[ClothingItem], header: str) -> None:
        if not items:
            self.output("Wardrobe is empty.")
            return
        self.output(header)
        for item in items:
            self.output(format_item(item))


__all__ = ["WardrobeShell", "format_item", "format_outfit"]
