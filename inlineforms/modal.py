"""Modal forms: a body of text with two buttons."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from inlineforms.elements import Button, FormError


@dataclass
class Modal:
    """A form with a body and two buttons, typically for yes and no.

    ``submit`` is called with ``(closed, tx)`` after the clicked button's own
    callback.
    """

    title: str = ""
    content: str = ""
    button1: Button = field(default_factory=Button)
    button2: Button = field(default_factory=Button)
    submit: Optional[Callable[[bool, Any], None]] = field(
        default=None, compare=False, repr=False
    )

    def submit_json(self, data: Union[bytes, str, None], tx: Any = None) -> None:
        """Handle a player's response; ``None`` means the form was closed."""
        if data is None:
            if self.submit is not None:
                self.submit(True, tx)
            return
        try:
            value = json.loads(data)
        except (ValueError, TypeError) as exc:
            raise FormError(f"error parsing JSON as bool: {exc}") from exc
        if value is None:
            value = False
        if not isinstance(value, bool):
            raise FormError(f"error parsing JSON as bool: {value!r}")
        button = self.button1 if value else self.button2
        if button.submit is not None:
            button.submit(tx)
        if self.submit is not None:
            self.submit(False, tx)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the form."""
        return {
            "type": "modal",
            "title": self.title,
            "content": self.content,
            "button1": self.button1.text,
            "button2": self.button2.text,
        }

    def to_json(self) -> str:
        """Serialise the form to the JSON sent to a player."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))