"""Ordered NCCO script assembly."""

from collections.abc import Iterable, Iterator
from typing import Any

from pydantic_core import to_json

from vonage_kit.ncco.actions import Action


class Ncco:
    """Call control script: actions run in the order they were added.

    Each action is converted to its wire form when added, so later changes
    to the action object do not affect the script.
    """

    def __init__(self, actions: Iterable[Action] = ()) -> None:
        self._actions: list[dict[str, Any]] = []
        for action in actions:
            self.add_action(action)

    def add_action(self, action: Action) -> None:
        """Append *action* as the next step of the script."""
        self._actions.append(action.prepare())

    def get_actions(self) -> list[dict[str, Any]]:
        """Return the wire actions in insertion order."""
        return list(self._actions)

    def to_json(self) -> str:
        """Serialize the script as a compact JSON array."""
        return to_json(self._actions).decode()

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.get_actions())
