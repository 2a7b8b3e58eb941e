"""Country-aware display formatting for phone numbers."""

import re
from typing import Dict, NamedTuple, Tuple

NON_DIGITS = re.compile(r"\D")


class PhoneTemplate(NamedTuple):
    """Digit grouping for a dial code.

    ``layouts`` maps the number of groups in use to the pattern that joins
    them. A single group is always rendered as bare digits.
    """

    groups: Tuple[int, ...]
    layouts: Dict[int, str]
    placeholder: str


DEFAULT_TEMPLATE = PhoneTemplate(
    groups=(3, 3, 4),
    layouts={2: "{0} {1}", 3: "{0} {1} {2}"},
    placeholder="XXX XXX XXXX",
)

TEMPLATES: Dict[str, PhoneTemplate] = {
    # US/Canada
    "+1": PhoneTemplate(
        groups=(3, 3, 4),
        layouts={2: "({0}) {1}", 3: "({0}) {1}-{2}"},
        placeholder="(XXX) XXX-XXXX",
    ),
    # UK
    "+44": PhoneTemplate(
        groups=(4, 3, 4),
        layouts={2: "{0} {1}", 3: "{0} {1} {2}"},
        placeholder="XXXX XXX XXXX",
    ),
    # UAE
    "+971": PhoneTemplate(
        groups=(3, 4),
        layouts={2: "({0}) - {1}"},
        placeholder="( ___ ) - ____",
    ),
}


def get_template(dial_code: str) -> PhoneTemplate:
    return TEMPLATES.get(dial_code, DEFAULT_TEMPLATE)


def strip_non_digits(value: str) -> str:
    return NON_DIGITS.sub("", value or "")


def format_phone(raw: str, dial_code: str) -> str:
    """Format ``raw`` for display using the grouping of ``dial_code``.

    Non-digit characters are dropped, as are digits beyond the template's
    capacity. Unknown dial codes use the generic ``XXX XXX XXXX`` grouping.

    >>> format_phone("1234567890", "+1")
    '(123) 456-7890'
    >>> format_phone("123", "+1")
    '123'
    """
    digits = strip_non_digits(raw)
    template = get_template(dial_code)
    if len(digits) <= template.groups[0]:
        return digits

    parts = []
    start = 0
    for size in template.groups:
        chunk = digits[start:start + size]
        if not chunk:
            break
        parts.append(chunk)
        start += size
    return template.layouts[len(parts)].format(*parts)


def phone_placeholder(dial_code: str) -> str:
    """Masked placeholder shown while the phone field is empty."""
    return get_template(dial_code).placeholder
