"""Elements that make up custom and menu forms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional


class FormError(ValueError):
    """Raised when a form response cannot be accepted."""


class Element(ABC):
    """An element that may be added to a custom form."""

    # Elements that take a value from the player set this and implement _parse.
    _accepts_value = False

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the element."""

    def submit_value(self, value: Any) -> None:
        """Handle the value a player submitted for this element.

        Static elements and buttons accept any value and ignore it. Elements
        without a submit callback accept any value without checking it.
        """
        if not self._accepts_value:
            return
        callback = getattr(self, "submit", None)
        if callback is None:
            return
        callback(*self._parse(value))

    def _parse(self, value: Any) -> tuple[Any, ...]:
        raise FormError(f"{type(self).__name__} does not take a value")


class MenuElement(Element):
    """An element that may also be added to a menu form."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Label(MenuElement):
    """A static box of text. Players cannot submit values to it."""

    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "label", "text": self.text}

    def submit_value(self, value: Any) -> None:
        """Accept any value; labels take no input."""
        super().submit_value(value)


@dataclass
class Input(Element):
    """A text input box."""

    text: str = ""
    default: str = ""
    placeholder: str = ""
    submit: Optional[Callable[[str], None]] = field(default=None, compare=False, repr=False)

    _accepts_value = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "input",
            "text": self.text,
            "default": self.default,
            "placeholder": self.placeholder,
        }

    def submit_value(self, value: Any) -> None:
        """Pass the submitted text to the submit callback, if any."""
        super().submit_value(value)

    def _parse(self, value: Any) -> tuple[Any, ...]:
        if not isinstance(value, str):
            raise FormError(f"value {value!r} is not allowed for input element")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise FormError(f"value {value!r} is not valid UTF8") from exc
        return (value,)


@dataclass
class Toggle(Element):
    """An on-off switch."""

    text: str = ""
    default: bool = False
    submit: Optional[Callable[[bool], None]] = field(default=None, compare=False, repr=False)

    _accepts_value = True

    def to_dict(self) -> dict[str, Any]:
        return {"type": "toggle", "text": self.text, "default": self.default}

    def submit_value(self, value: Any) -> None:
        """Pass the submitted state to the submit callback, if any."""
        super().submit_value(value)

    def _parse(self, value: Any) -> tuple[Any, ...]:
        if not isinstance(value, bool):
            raise FormError(f"value {value!r} is not allowed for toggle element")
        return (value,)


@dataclass
class Slider(Element):
    """A slider selecting a number between min_value and max_value."""

    text: str = ""
    min_value: float = 0.0
    max_value: float = 0.0
    step_size: float = 0.0
    default: float = 0.0
    submit: Optional[Callable[[float], None]] = field(default=None, compare=False, repr=False)

    _accepts_value = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "slider",
            "text": self.text,
            "min": self.min_value,
            "max": self.max_value,
            "step": self.step_size,
            "default": self.default,
        }

    def submit_value(self, value: Any) -> None:
        """Pass the submitted number to the submit callback, if any."""
        super().submit_value(value)

    def _parse(self, value: Any) -> tuple[Any, ...]:
        if not _is_number(value):
            raise FormError(f"value {value!r} is not allowed for slider element")
        number = float(value)
        if number < self.min_value or number > self.max_value:
            raise FormError(
                f"slider value {number} is out of range {self.min_value}-{self.max_value}"
            )
        return (number,)


@dataclass
class _OptionElement(Element):
    text: str = ""
    options: list[str] = field(default_factory=list)
    default_index: int = 0
    submit: Optional[Callable[[int, str], None]] = field(default=None, compare=False, repr=False)

    _accepts_value = True
    _kind = "option"

    def _parse(self, value: Any) -> tuple[Any, ...]:
        if not _is_integer(value):
            raise FormError(f"value {value!r} is not allowed for {self._kind} element")
        if value < 0 or value >= len(self.options):
            raise FormError(
                f"dropdown value {value} is out of range 0-{len(self.options) - 1}"
            )
        return (value, self.options[value])


@dataclass
class Dropdown(_OptionElement):
    """A dropdown from which one of the options may be selected."""

    _kind = "dropdown"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "dropdown",
            "text": self.text,
            "default": self.default_index,
            "options": list(self.options),
        }

    def submit_value(self, value: Any) -> None:
        """Pass the selected index and option to the submit callback, if any."""
        super().submit_value(value)


@dataclass
class StepSlider(_OptionElement):
    """A slider whose steps are a list of options."""

    _kind = "step slider"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "step_slider",
            "text": self.text,
            "default": self.default_index,
            "steps": list(self.options),
        }

    def submit_value(self, value: Any) -> None:
        """Pass the selected index and step to the submit callback, if any."""
        super().submit_value(value)


@dataclass
class Header(MenuElement):
    """A larger, bold static label."""

    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "header", "text": self.text}

    def submit_value(self, value: Any) -> None:
        """Accept any value; headers take no input."""
        super().submit_value(value)


@dataclass
class Divider(MenuElement):
    """A horizontal line separating elements."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "divider", "text": ""}

    def submit_value(self, value: Any) -> None:
        """Accept any value; dividers take no input."""
        super().submit_value(value)


@dataclass
class Button(MenuElement):
    """A button on a menu or modal form, with an optional image.

    Its submit callback is called by the form it belongs to when the button
    is clicked, never with a submitted value.
    """

    text: str = ""
    image: str = ""
    submit: Optional[Callable[[Any], None]] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "button", "text": self.text}
        if self.image:
            kind = "url" if self.image.startswith(("http:", "https:")) else "path"
            data["image"] = {"type": kind, "data": self.image}
        return data

    def submit_value(self, value: Any) -> None:
        """Accept any value; buttons are handled by their form."""
        super().submit_value(value)