"""Custom forms: forms with fields that a player fills out."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from inlineforms.elements import Divider, Element, FormError, Header, Label

_STATIC_ELEMENTS = (Divider, Header, Label)


@dataclass
class Custom:
    """A form whose elements are filled out by the player it is sent to.

    ``submit`` is called with ``(closed, values, tx)`` after every element's own
    submit callback. When the form was closed, ``values`` is ``None``.
    """

    title: str = ""
    elements: list[Element] = field(default_factory=list)
    submit: Optional[Callable[[bool, Optional[list[Any]], Any], None]] = field(
        default=None, compare=False, repr=False
    )

    def add(self, element: Element) -> None:
        """Append an element to the bottom of the form."""
        self.elements.append(element)

    def submit_json(self, data: Union[bytes, str, None], tx: Any = None) -> None:
        """Handle a player's response; ``None`` means the form was closed."""
        if data is None:
            if self.submit is not None:
                self.submit(True, None, tx)
            return
        try:
            values = json.loads(data)
        except (ValueError, TypeError) as exc:
            raise FormError(f"error decoding JSON data to list: {exc}") from exc
        if values is None:
            values = []
        if not isinstance(values, list):
            raise FormError("error decoding JSON data to list: value is not an array")

        elements = self.elements
        if len(elements) != len(values):
            elements = [e for e in self.elements if not isinstance(e, _STATIC_ELEMENTS)]
            if len(elements) != len(values):
                raise FormError("form JSON data array does not have enough values")

        for element, value in zip(elements, values):
            try:
                element.submit_value(value)
            except FormError as exc:
                raise FormError(f"error parsing form response value: {exc}") from exc

        if self.submit is not None:
            self.submit(False, values, tx)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the form."""
        if not self.elements:
            raise FormError("menu form requires at least one element")
        return {
            "type": "custom_form",
            "title": self.title,
            "content": [element.to_dict() for element in self.elements],
        }

    def to_json(self) -> str:
        """Serialise the form to the JSON sent to a player."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))