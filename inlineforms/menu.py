"""Menu forms: a title, a body and a list of buttons."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from inlineforms.elements import Button, FormError, MenuElement


@dataclass
class Menu:
    """A menu form made of a title, content and menu elements.

    Only buttons may be clicked. The buttons are indexed when the form is
    serialised, so a response is only understood after :meth:`to_dict` or
    :meth:`to_json` was called. ``submit`` is called with ``(closed, tx)`` after
    the clicked button's own callback.
    """

    title: str = ""
    content: str = ""
    elements: list[MenuElement] = field(default_factory=list)
    submit: Optional[Callable[[bool, Any], None]] = field(
        default=None, compare=False, repr=False
    )
    _buttons: list[Button] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def add(self, element: MenuElement) -> None:
        """Append a menu element to the bottom of the form."""
        if not isinstance(element, MenuElement):
            raise TypeError(f"{type(element).__name__} cannot be added to a menu form")
        self.elements.append(element)

    def submit_json(self, data: Union[bytes, str, None], tx: Any = None) -> None:
        """Handle a player's response; ``None`` means the form was closed."""
        if data is None:
            if self.submit is not None:
                self.submit(True, tx)
            return
        try:
            index = json.loads(data)
        except (ValueError, TypeError) as exc:
            raise FormError(f"cannot parse button index as int: {exc}") from exc
        if index is None:
            index = 0
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise FormError(f"cannot parse button index as int: {index!r}")
        if index >= len(self._buttons):
            raise FormError(
                f"button index points to invalid button: {index} "
                f"(only {len(self._buttons)} buttons present)"
            )
        button = self._buttons[index]
        if button.submit is not None:
            button.submit(tx)
        if self.submit is not None:
            self.submit(False, tx)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the form."""
        self._buttons = [e for e in self.elements if isinstance(e, Button)]
        return {
            "type": "form",
            "title": self.title,
            "content": self.content,
            "elements": [element.to_dict() for element in self.elements],
        }

    def to_json(self) -> str:
        """Serialise the form to the JSON sent to a player."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))