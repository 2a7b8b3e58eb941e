"""Phone number field combining the country selector and the formatter."""

from typing import Callable, Optional

from guest_signup.countries import Country, default_country
from guest_signup.phone.formatter import format_phone, phone_placeholder
from guest_signup.phone.selector import CountrySelector
from guest_signup.settings import settings


class PhoneNumberInput:
    """Controlled phone field.

    Keeps the selected country and the formatted number. Every keystroke
    is reformatted with the current country's dial code, and switching
    country clears the number.
    """

    def __init__(
        self,
        value: str = "",
        on_change: Optional[Callable[[str], None]] = None,
        on_country_change: Optional[Callable[[Country], None]] = None,
        country: Optional[Country] = None,
        error: Optional[str] = None,
        placeholder: Optional[str] = None,
        max_length: Optional[int] = None,
    ) -> None:
        self.value = value
        self.on_change = on_change
        self.on_country_change = on_country_change
        self.error = error
        if max_length is None:
            max_length = settings.phone_max_length
        self.max_length = max_length
        self._placeholder = placeholder
        self.selector = CountrySelector(
            selected=country or default_country(),
            on_country_change=self.change_country,
        )

    @property
    def country(self) -> Country:
        return self.selector.selected

    @property
    def dial_code(self) -> str:
        return self.country.dial_code

    @property
    def placeholder(self) -> str:
        return self._placeholder or phone_placeholder(self.dial_code)

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    def type(self, raw: str) -> str:
        """Handle new text in the field and return its formatted form."""
        formatted = format_phone(raw[:self.max_length], self.dial_code)
        self.value = formatted
        if self.on_change is not None:
            self.on_change(formatted)
        return formatted

    def change_country(self, country: Country) -> None:
        self.selector.selected = country
        if self.on_country_change is not None:
            self.on_country_change(country)
        self.value = ""
        if self.on_change is not None:
            self.on_change("")
