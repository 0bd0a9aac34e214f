import gettext
import locale
import os
from typing import Callable, Optional

LOCALES_DIR = os.path.join(os.path.dirname(__file__), 'locales')
DOMAIN = 'udpmultisender'


def _resolve_language(language_code: Optional[str]) -> str:
    """Maps 'System' or None to the OS language, e.g. 'ko_KR' -> 'ko'."""
    if language_code and language_code.lower() != 'system':
        return language_code
    try:
        lang_code, _ = locale.getlocale()
        return lang_code.split('_')[0] if lang_code else 'en'
    except (ValueError, AttributeError):
        return 'en'


def get_translator(language_code: Optional[str] = None) -> Callable[[str], str]:
    """
    Returns a gettext translator for the language.
    Falls back to the identity translator if no catalog is installed.
    """
    try:
        translation = gettext.translation(
            DOMAIN,
            localedir=LOCALES_DIR,
            languages=[_resolve_language(language_code)]
        )
        return translation.gettext
    except FileNotFoundError:
        return gettext.gettext
