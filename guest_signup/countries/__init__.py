from .directory import COUNTRIES, Country, default_country, get_country
from .options import GENDER_OPTIONS, RESIDENCE_COUNTRY_OPTIONS, Option

__all__ = [
    "COUNTRIES",
    "Country",
    "default_country",
    "get_country",
    "GENDER_OPTIONS",
    "RESIDENCE_COUNTRY_OPTIONS",
    "Option",
]
