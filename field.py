"""
Editable form field that reconciles the confirmed model value with the
user's in-progress widget edit.

Value precedence is: raw edit > confirmed model value > type default.
Validation is never stored; `value()` and `error()` run the validator on
every call so validators that read sibling fields always see live values.
"""
from __future__ import annotations
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from textual.widgets import Select

R = TypeVar("R")
S = TypeVar("S")

NBSP = "\u00a0"

Listener = Callable[["Field"], None]


def get_input_text(event: Any) -> str:
    """Raw text of an Input.Changed / Select.Changed event."""
    value = getattr(event, "value", None)
    if value is None or value is Select.BLANK:
        return ""
    return str(value)


def get_input_checked(event: Any) -> bool:
    """Raw state of a Checkbox.Changed event."""
    return bool(getattr(event, "value", False))


class Field(Generic[R, S]):
    def __init__(
        self,
        converter: Callable[[Any], R],
        validator: Callable[[R], S],
        default: R,
        depends_on: Sequence["Field"] = (),
    ) -> None:
        self._converter = converter
        self._validator = validator
        self._default = default
        self.depends_on: List[Field] = list(depends_on)
        self.model_value: Optional[R] = None
        self.raw_value: Optional[R] = None
        self._listeners: List[Listener] = []

    # -- Observers ---------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -- Input -------------------------------------------------------------

    def on_change(self, raw: R) -> None:
        """Record the user's edit. No validation happens here."""
        self.raw_value = raw
        self._notify()

    def extract(self, event: Any) -> R:
        return self._converter(event)

    def handle(self, event: Any) -> None:
        self.on_change(self.extract(event))

    def change(self) -> Callable[[Any], None]:
        """Widget callback that feeds events through the converter."""
        return self.handle

    def set(self, model_raw: R) -> None:
        """Load a confirmed value. Any unsent edit is discarded."""
        self.model_value = model_raw
        self.raw_value = None
        self._notify()

    # -- Derived state -----------------------------------------------------

    def effective_value(self) -> R:
        if self.raw_value is not None:
            return self.raw_value
        if self.model_value is not None:
            return self.model_value
        return self._default

    def value(self) -> Optional[S]:
        try:
            return self._validator(self.effective_value())
        except ValueError:
            return None

    def error(self) -> Optional[str]:
        try:
            self._validator(self.effective_value())
        except ValueError as e:
            return str(e) or "Invalid value"
        return None

    def has_errors(self) -> bool:
        return self.error() is not None

    def error_message(self) -> str:
        # NBSP keeps the error line's height when there is nothing to show
        return self.error() or NBSP

    def is_dirty(self) -> bool:
        return (
            self.has_errors()
            or self.raw_value is not None
            or (self.model_value is not None and self.effective_value() != self.model_value)
        )

    def __repr__(self) -> str:
        return (
            f"Field(model={self.model_value!r}, raw={self.raw_value!r}, "
            f"error={self.error()!r})"
        )


def text_field(validator: Callable[[str], S], depends_on: Sequence[Field] = ()) -> Field[str, S]:
    return Field(get_input_text, validator, "", depends_on)


def checked_field(validator: Callable[[bool], S], depends_on: Sequence[Field] = ()) -> Field[bool, S]:
    return Field(get_input_checked, validator, False, depends_on)
