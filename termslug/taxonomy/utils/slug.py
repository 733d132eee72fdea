# taxonomy/utils/slug.py
from types import MappingProxyType

from django.utils.text import slugify
from unidecode import unidecode

# Латиница-1: акцентированные буквы -> ASCII. Значения не пересекаются с ключами,
# поэтому fold_accents идемпотентна.
ACCENT_MAP = MappingProxyType({
    "é": "e", "è": "e", "ê": "e", "ë": "e",
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a",
    "ç": "c",
    "í": "i", "ì": "i", "î": "i", "ï": "i",
    "ó": "o", "ò": "o", "ô": "o", "õ": "o", "ö": "o",
    "ú": "u", "ù": "u", "û": "u", "ü": "u",
    "ñ": "n",
    "ý": "y", "ÿ": "y",
    "É": "E", "È": "E", "Ê": "E", "Ë": "E",
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A", "Å": "A",
    "Ç": "C",
    "Í": "I", "Ì": "I", "Î": "I", "Ï": "I",
    "Ó": "O", "Ò": "O", "Ô": "O", "Õ": "O", "Ö": "O",
    "Ú": "U", "Ù": "U", "Û": "U", "Ü": "U",
    "Ñ": "N",
    "Ý": "Y", "Ÿ": "Y",
})

_FOLD_TABLE = str.maketrans(dict(ACCENT_MAP))


def fold_accents(value: str) -> str:
    """'Café Déjà-vu' -> 'Cafe Deja-vu'. Всё, чего нет в таблице, остаётся как есть."""
    return (value or "").translate(_FOLD_TABLE)


def ascii_slug(value: str) -> str:
    return slugify(unidecode(value or ""), allow_unicode=False)
