"""Searchable country dropdown used by the phone number input."""

from typing import Callable, List, NamedTuple, Optional, Sequence

from loguru import logger

from guest_signup.core.constants import DropdownConfig, ErrorMessages
from guest_signup.countries import COUNTRIES, Country


class Rect(NamedTuple):
    """Viewport-relative bounding box of the anchor element."""

    top: float
    left: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


class Viewport(NamedTuple):
    width: float
    height: float


class DropdownPosition(NamedTuple):
    top: float
    left: float
    width: float
    open_upward: bool


def filter_countries(countries: Sequence[Country], term: str) -> List[Country]:
    """Countries whose name, dial code or ISO code contains ``term``."""
    needle = (term or "").lower()
    return [
        country
        for country in countries
        if needle in country.name.lower()
        or needle in country.dial_code.lower()
        or needle in country.code.lower()
    ]


def calculate_dropdown_position(anchor: Rect, viewport: Viewport) -> DropdownPosition:
    """Place the panel below ``anchor``, flipping above it when space runs out."""
    space_below = viewport.height - anchor.bottom - DropdownConfig.SPACING
    space_above = anchor.top - DropdownConfig.SPACING
    open_upward = space_below < DropdownConfig.HEIGHT and space_above > space_below

    left = anchor.left
    if left + anchor.width > viewport.width:
        left = viewport.width - anchor.width - DropdownConfig.EDGE_MARGIN

    if open_upward:
        top = anchor.top - DropdownConfig.HEIGHT - DropdownConfig.SPACING
    else:
        top = anchor.bottom + DropdownConfig.SPACING

    return DropdownPosition(
        top=max(DropdownConfig.EDGE_MARGIN, top),
        left=max(DropdownConfig.EDGE_MARGIN, left),
        width=min(anchor.width, viewport.width - 2 * DropdownConfig.EDGE_MARGIN),
        open_upward=open_upward,
    )


class CountrySelector:
    """State of the country dropdown: open flag, search term and selection.

    :param selected: country currently shown on the trigger.
    :param on_country_change: called with the chosen country.
    :param countries: directory to search, defaults to :data:`COUNTRIES`.
    """

    def __init__(
        self,
        selected: Country,
        on_country_change: Optional[Callable[[Country], None]] = None,
        countries: Sequence[Country] = COUNTRIES,
    ) -> None:
        self.selected = selected
        self.on_country_change = on_country_change
        self.countries = countries
        self.is_open = False
        self.search_term = ""
        self.position: Optional[DropdownPosition] = None
        self._anchor: Optional[Rect] = None
        self._viewport: Optional[Viewport] = None

    @property
    def filtered(self) -> List[Country]:
        return filter_countries(self.countries, self.search_term)

    @property
    def empty_message(self) -> Optional[str]:
        """Text shown instead of the list when nothing matches."""
        if self.filtered:
            return None
        return ErrorMessages.NO_COUNTRIES_FOUND

    def toggle(
        self,
        anchor: Optional[Rect] = None,
        viewport: Optional[Viewport] = None,
    ) -> None:
        if self.is_open:
            self.close()
            return
        self.is_open = True
        self._anchor = anchor
        self._viewport = viewport
        self.reposition()

    def reposition(
        self,
        anchor: Optional[Rect] = None,
        viewport: Optional[Viewport] = None,
    ) -> None:
        """Recompute placement; called on open, scroll and resize."""
        if not self.is_open:
            return
        self._anchor = anchor or self._anchor
        self._viewport = viewport or self._viewport
        if self._anchor is None or self._viewport is None:
            return
        self.position = calculate_dropdown_position(self._anchor, self._viewport)

    def search(self, term: str) -> None:
        self.search_term = term

    def select(self, country: Country) -> None:
        logger.debug(f"Country selected: {country.code}")
        self.selected = country
        if self.on_country_change is not None:
            self.on_country_change(country)
        self.close()

    def click_outside(self) -> None:
        """Pointer-down outside the trigger and panel; dismisses without selecting."""
        if self.is_open:
            self.close()

    def close(self) -> None:
        self.is_open = False
        self.search_term = ""
        self.position = None
