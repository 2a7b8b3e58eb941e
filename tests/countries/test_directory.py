from guest_signup.countries import (
    COUNTRIES,
    GENDER_OPTIONS,
    RESIDENCE_COUNTRY_OPTIONS,
    Country,
    default_country,
    get_country,
)


def test_country_codes_are_unique() -> None:
    codes = [country.code for country in COUNTRIES]
    assert len(codes) == len(set(codes))


def test_get_country_ignores_case() -> None:
    country = get_country("gb")
    assert country is not None
    assert country.name == "United Kingdom"
    assert country.dial_code == "+44"


def test_get_country_unknown_code() -> None:
    assert get_country("ZZ") is None
    assert get_country("") is None


def test_default_country_is_uae() -> None:
    country = default_country()
    assert country.code == "AE"
    assert country.dial_code == "+971"


def test_flag_points_to_lowercase_code() -> None:
    country = get_country("US")
    assert country is not None
    assert country.flag == "https://flagcdn.com/w40/us.png"


def test_country_accepts_camel_case_fields() -> None:
    country = Country.model_validate(
        {"name": "Oman", "code": "OM", "dialCode": "+968", "flag": "om.png"},
    )
    assert country.dial_code == "+968"
    assert country.model_dump(by_alias=True)["dialCode"] == "+968"


def test_form_options() -> None:
    assert [option.value for option in GENDER_OPTIONS] == ["male", "female", "other"]
    assert [option.value for option in RESIDENCE_COUNTRY_OPTIONS] == ["us", "ae", "uk"]
