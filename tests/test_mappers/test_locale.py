from app.mappers.locale import localized_number, localized_string


def test_localized_string_picks_locale():
    assert localized_string({"en": "Hello", "es": "Hola"}, "es") == "Hola"


def test_localized_string_falls_back_to_english():
    assert localized_string({"en": "Hello", "es": ""}, "es") == "Hello"
    assert localized_string({"en": "Hello"}, "fr") == "Hello"


def test_localized_string_plain_and_missing():
    assert localized_string("Plain") == "Plain"
    assert localized_string(None) == ""
    assert localized_string({"es": "Hola"}, "fr") == ""


def test_localized_number():
    assert localized_number({"en": 10, "es": 9.5}, "es") == 9.5
    assert localized_number({"en": "12"}, "es") == 12.0
    assert localized_number(7) == 7.0


def test_localized_number_invalid():
    assert localized_number(None) == 0.0
    assert localized_number({"en": "n/a"}) == 0.0
