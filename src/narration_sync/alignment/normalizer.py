"""Comparison keys for narration tokens and recognizer words."""

import re
import unicodedata
from functools import lru_cache

from unidecode import unidecode

# Straight, curly-left and curly-right apostrophes plus backtick
_APOSTROPHES = re.compile("['‘’`]")


@lru_cache(maxsize=4096)
def _fold(char: str) -> str:
    """Strip diacritics from a Latin letter, leave other scripts alone."""
    if char.isascii() or "LATIN" not in unicodedata.name(char, ""):
        return char
    return "".join(c for c in unidecode(char).lower() if c.isalnum())


def normalize_word(token: str) -> str:
    """Canonicalize a token into a comparison key.

    Lowercases, drops apostrophes so possessives and contractions match
    their transcription ("Padmé's" -> "padmes"), drops every character that
    is not a letter or digit (punctuation and symbols such as "©" or "€"),
    then folds diacritics on what is left. An empty result means the token
    is not alignable.
    """
    key = unicodedata.normalize("NFC", token.lower())
    key = _APOSTROPHES.sub("", key)
    key = "".join(_fold(char) for char in key if char.isalnum())
    return unicodedata.normalize("NFC", key).strip()


def is_alignable(token: str) -> bool:
    return bool(normalize_word(token))
