DEFAULT_LOCALE = "en"


def _pick(value, locale: str):
    if isinstance(value, dict):
        picked = value.get(locale)
        if picked is None or picked == "":
            picked = value.get(DEFAULT_LOCALE)
        return picked
    return value


def localized_string(value, locale: str = DEFAULT_LOCALE) -> str:
    picked = _pick(value, locale)
    if picked is None:
        return ""
    return str(picked)


def localized_number(value, locale: str = DEFAULT_LOCALE) -> float:
    picked = _pick(value, locale)
    if picked is None or picked == "":
        return 0.0
    try:
        return float(picked)
    except (TypeError, ValueError):
        return 0.0
