"""Language code normalization and validation."""
from __future__ import annotations

import re

from langroute.translations.errors import InvalidLanguageCode

# Letters only: rules out separators, dots and anything else that could
# escape the translations directory once joined into a path
LANGUAGE_CODE_PATTERN = re.compile(r"[A-Za-z]{2,8}")


def normalize_language_code(raw: str) -> str:
    """Truncate a language code at its first ``-``.

    ``"en-US"`` becomes ``"en"`` and ``"fr"`` stays ``"fr"``. No other
    locale fallback is applied and case is left untouched.
    """
    return raw.split("-", 1)[0]


def is_valid_language_code(code: str) -> bool:
    return bool(LANGUAGE_CODE_PATTERN.fullmatch(code))


def validate_language_code(raw: str) -> str:
    """Normalize ``raw`` and reject it unless it is a plain language code.

    Raises:
        InvalidLanguageCode: if the normalized code is not 2-8 ASCII letters.
    """
    code = normalize_language_code(raw)
    if not is_valid_language_code(code):
        raise InvalidLanguageCode(raw, f"Invalid language code: {raw!r}")
    return code
