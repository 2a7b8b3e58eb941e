"""Four-cell one-time password editor."""

import re
from typing import Callable, List, Optional, Sequence

from guest_signup.core.constants import OTPConfig

DIGIT = re.compile(r"[0-9]")

OTPCode = List[str]


def empty_code() -> OTPCode:
    return [""] * OTPConfig.LENGTH


def is_complete(code: Sequence[str]) -> bool:
    """True when every cell holds exactly one character."""
    return len(code) == OTPConfig.LENGTH and all(len(digit) == 1 for digit in code)


class OTPDigitInput:
    """Cell-by-cell code entry with auto-advance, backspace retreat and paste.

    ``focused_index`` tracks which cell has keyboard focus, None before
    mount or while disabled.
    """

    def __init__(
        self,
        value: Optional[Sequence[str]] = None,
        on_change: Optional[Callable[[OTPCode], None]] = None,
        disabled: bool = False,
    ) -> None:
        self.value: OTPCode = list(value) if value is not None else empty_code()
        self.on_change = on_change
        self._disabled = disabled
        self.focused_index: Optional[int] = None

    @property
    def disabled(self) -> bool:
        return self._disabled

    @disabled.setter
    def disabled(self, flag: bool) -> None:
        """Disabling drops focus; enabling again focuses the first cell."""
        was_disabled = self._disabled
        self._disabled = flag
        if flag:
            self.focused_index = None
        elif was_disabled:
            self.mount()

    @property
    def code(self) -> str:
        return "".join(self.value)

    @property
    def complete(self) -> bool:
        return is_complete(self.value)

    def mount(self) -> None:
        if not self.disabled:
            self.focused_index = 0

    def focus(self, index: int) -> None:
        if 0 <= index < OTPConfig.LENGTH:
            self.focused_index = index

    def input(self, index: int, text: str) -> None:
        """Typing into cell ``index``; multi-character input is ignored."""
        if self.disabled or len(text) > 1:
            return
        next_value = list(self.value)
        next_value[index] = text
        self._emit(next_value)
        if text and index < OTPConfig.LENGTH - 1:
            self.focus(index + 1)

    def key_down(self, index: int, key: str) -> None:
        if self.disabled:
            return
        if key == OTPConfig.BACKSPACE_KEY and not self.value[index] and index > 0:
            self.focus(index - 1)

    def paste(self, index: int, text: str) -> None:
        """Spread pasted digits over the cells; only cell 0 accepts paste."""
        if self.disabled or index != 0:
            return
        digits = DIGIT.findall(text or "")[:OTPConfig.LENGTH]
        next_value = empty_code()
        next_value[:len(digits)] = digits
        self._emit(next_value)
        self.focus(min(len(digits), OTPConfig.LENGTH - 1))

    def clear(self) -> None:
        self.value = empty_code()

    def _emit(self, next_value: OTPCode) -> None:
        self.value = next_value
        if self.on_change is not None:
            self.on_change(list(next_value))
