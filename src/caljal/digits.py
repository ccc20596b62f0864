"""Latin / Persian / Arabic-Indic digit transliteration."""
from __future__ import annotations

LATIN_DIGITS = "0123456789"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_PERSIAN = str.maketrans(LATIN_DIGITS + ARABIC_INDIC_DIGITS, PERSIAN_DIGITS * 2)
_TO_LATIN = str.maketrans(PERSIAN_DIGITS + ARABIC_INDIC_DIGITS, LATIN_DIGITS * 2)


def to_persian_digits(text: str) -> str:
    return text.translate(_TO_PERSIAN)


def to_latin_digits(text: str) -> str:
    return text.translate(_TO_LATIN)
