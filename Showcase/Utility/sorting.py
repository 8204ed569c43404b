"""Locale-aware ordering for display strings."""
import locale
import unicodedata
from typing import Tuple


def _base_letters(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def locale_sort_key(text: str) -> Tuple[str, str, str]:
    # accents only break ties, so "Éclair" sorts among the e's even under the C locale
    return locale.strxfrm(_base_letters(text)), locale.strxfrm(text.casefold()), text


def configure_collation() -> str:
    """Apply the environment's LC_COLLATE; returns the active collation locale."""
    return locale.setlocale(locale.LC_COLLATE, "")
