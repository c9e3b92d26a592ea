# Static table of selectable output languages, plus the lookup/filter helpers
# the language picker uses.

from __future__ import annotations

from typing import List

from .generate.types import Language

EUROPEAN_LANGUAGES: List[Language] = [
    Language("en", "English", "English"),
    Language("cs", "Czech", "čeština"),
    Language("sk", "Slovak", "slovenčina"),
    Language("pl", "Polish", "polski"),
    Language("de", "German", "Deutsch"),
    Language("fr", "French", "français"),
    Language("es", "Spanish", "español"),
    Language("it", "Italian", "italiano"),
    Language("pt", "Portuguese", "português"),
    Language("nl", "Dutch", "Nederlands"),
    Language("ru", "Russian", "русский"),
    Language("uk", "Ukrainian", "українська"),
    Language("bg", "Bulgarian", "български"),
    Language("hr", "Croatian", "hrvatski"),
    Language("sr", "Serbian", "српски"),
    Language("sl", "Slovenian", "slovenščina"),
    Language("hu", "Hungarian", "magyar"),
    Language("ro", "Romanian", "română"),
    Language("el", "Greek", "ελληνικά"),
    Language("fi", "Finnish", "suomi"),
    Language("sv", "Swedish", "svenska"),
    Language("da", "Danish", "dansk"),
    Language("no", "Norwegian", "norsk"),
    Language("is", "Icelandic", "íslenska"),
    Language("ga", "Irish", "Gaeilge"),
    Language("mt", "Maltese", "Malti"),
    Language("lv", "Latvian", "latviešu"),
    Language("lt", "Lithuanian", "lietuvių"),
    Language("et", "Estonian", "eesti"),
    Language("ca", "Catalan", "català"),
    Language("eu", "Basque", "euskara"),
    Language("cy", "Welsh", "Cymraeg"),
    Language("br", "Breton", "brezhoneg"),
]

DEFAULT_LANGUAGE = EUROPEAN_LANGUAGES[0]

_BY_CODE = {lang.code: lang for lang in EUROPEAN_LANGUAGES}


class UnknownLanguage(LookupError):
    pass


def get_language(code: str) -> Language:
    try:
        return _BY_CODE[code.strip().lower()]
    except KeyError:
        raise UnknownLanguage(f"Unknown language code: {code!r}") from None


def search_languages(query: str = "") -> List[Language]:
    """Case-insensitive match on English name, native name or code. Blank query returns everything."""
    q = (query or "").strip().casefold()
    if not q:
        return list(EUROPEAN_LANGUAGES)
    return [
        lang for lang in EUROPEAN_LANGUAGES
        if q in lang.english_name.casefold()
        or q in lang.native_name.casefold()
        or q == lang.code
    ]
