"""Message catalogue lookup for user-facing text (panel titles, errors)."""

import os
from typing import Dict, List, Optional

from config import get_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK

BASE_LANG = "en"


def _backfill(base_lang: str = BASE_LANG) -> None:
    # every catalogue answers every key; gaps take the base text
    base = LANG_PACK[base_lang]
    for lang, messages in LANG_PACK.items():
        if lang != base_lang:
            for key, text in base.items():
                messages.setdefault(key, text)


_backfill()


def available_langs() -> List[str]:
    return sorted(LANG_PACK)


def effective_lang(preferred: Optional[str] = None) -> str:
    """Pick the catalogue: TASKMAN_LANG, then ``preferred``, then the user config.

    Tests always get English unless TASKMAN_LANG says otherwise.
    """
    forced = os.getenv("TASKMAN_LANG")
    if forced:
        return forced if forced in LANG_PACK else BASE_LANG
    if os.getenv("PYTEST_CURRENT_TEST"):
        return BASE_LANG
    chosen = preferred or get_user_lang()
    return chosen if chosen in LANG_PACK else BASE_LANG


def catalogue(lang: Optional[str] = None) -> Dict[str, str]:
    return LANG_PACK[effective_lang(lang)]


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    """Look up ``key`` and fill its placeholders.

    Unknown keys come back as the key itself; a template whose placeholders
    are not all supplied comes back unformatted.
    """
    template = catalogue(lang).get(key, key)
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template


__all__ = ["BASE_LANG", "available_langs", "effective_lang", "catalogue", "translate"]
