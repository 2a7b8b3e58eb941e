from .formatter import format_phone, phone_placeholder
from .input import PhoneNumberInput
from .selector import (
    CountrySelector,
    DropdownPosition,
    Rect,
    Viewport,
    calculate_dropdown_position,
    filter_countries,
)

__all__ = [
    "format_phone",
    "phone_placeholder",
    "PhoneNumberInput",
    "CountrySelector",
    "DropdownPosition",
    "Rect",
    "Viewport",
    "calculate_dropdown_position",
    "filter_countries",
]
