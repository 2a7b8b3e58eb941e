"""Choices offered by the select fields of the registration form."""

from typing import NamedTuple, Tuple


class Option(NamedTuple):
    value: str
    label: str


GENDER_OPTIONS: Tuple[Option, ...] = (
    Option("male", "Male"),
    Option("female", "Female"),
    Option("other", "Other"),
)

RESIDENCE_COUNTRY_OPTIONS: Tuple[Option, ...] = (
    Option("us", "United States"),
    Option("ae", "United Arab Emirates"),
    Option("uk", "United Kingdom"),
)
