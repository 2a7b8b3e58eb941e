"""Static directory of countries offered by the phone and residence inputs."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from guest_signup.settings import settings

FLAG_URL_TEMPLATE = "https://flagcdn.com/w40/{code}.png"


class Country(BaseModel):
    """A country record; ``code`` is the identity key."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    name: str
    code: str
    dial_code: str = Field(alias="dialCode")
    flag: str


def _country(name: str, code: str, dial_code: str) -> Country:
    return Country(
        name=name,
        code=code,
        dial_code=dial_code,
        flag=FLAG_URL_TEMPLATE.format(code=code.lower()),
    )


COUNTRIES: Tuple[Country, ...] = (
    _country("United Arab Emirates", "AE", "+971"),
    _country("United States", "US", "+1"),
    _country("United Kingdom", "GB", "+44"),
    _country("Canada", "CA", "+1"),
    _country("Australia", "AU", "+61"),
    _country("Bahrain", "BH", "+973"),
    _country("Brazil", "BR", "+55"),
    _country("China", "CN", "+86"),
    _country("Egypt", "EG", "+20"),
    _country("France", "FR", "+33"),
    _country("Germany", "DE", "+49"),
    _country("Hong Kong", "HK", "+852"),
    _country("India", "IN", "+91"),
    _country("Indonesia", "ID", "+62"),
    _country("Italy", "IT", "+39"),
    _country("Japan", "JP", "+81"),
    _country("Jordan", "JO", "+962"),
    _country("Kuwait", "KW", "+965"),
    _country("Lebanon", "LB", "+961"),
    _country("Macau", "MO", "+853"),
    _country("Malaysia", "MY", "+60"),
    _country("Mexico", "MX", "+52"),
    _country("Netherlands", "NL", "+31"),
    _country("Oman", "OM", "+968"),
    _country("Pakistan", "PK", "+92"),
    _country("Philippines", "PH", "+63"),
    _country("Qatar", "QA", "+974"),
    _country("Russia", "RU", "+7"),
    _country("Saudi Arabia", "SA", "+966"),
    _country("Singapore", "SG", "+65"),
    _country("South Africa", "ZA", "+27"),
    _country("South Korea", "KR", "+82"),
    _country("Spain", "ES", "+34"),
    _country("Switzerland", "CH", "+41"),
    _country("Taiwan", "TW", "+886"),
    _country("Thailand", "TH", "+66"),
    _country("Turkey", "TR", "+90"),
    _country("Vietnam", "VN", "+84"),
)


def get_country(code: str) -> Optional[Country]:
    """Look up a country by ISO code, ignoring case."""
    code = (code or "").upper()
    for country in COUNTRIES:
        if country.code == code:
            return country
    return None


def default_country() -> Country:
    """Country preselected by the phone input."""
    return get_country(settings.default_country_code) or COUNTRIES[0]
