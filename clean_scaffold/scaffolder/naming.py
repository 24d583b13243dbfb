"""Name normalization for generated file, folder, and class names.

Both transforms are pure, never raise, and apply ASCII case rules only so the
output does not depend on the locale.
"""

from __future__ import annotations

import re
import string

_WHITESPACE_RE = re.compile(r"\s+")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_WORD_SPLIT_RE = re.compile(r"[_ ]")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_snake_case(value: str) -> str:
    """Convert ``"user auth"`` or ``"UserAuth"`` to ``"user_auth"``.

    Whitespace runs become a single underscore and an underscore is inserted
    at each lowercase-to-uppercase boundary before lowercasing.
    """
    result = _WHITESPACE_RE.sub("_", value)
    result = _CAMEL_BOUNDARY_RE.sub(r"\1_\2", result)
    return result.translate(_ASCII_LOWER)


def to_pascal_case(value: str) -> str:
    """Convert ``"user auth"`` or ``"user_auth"`` to ``"UserAuth"``.

    Each word keeps only its first letter uppercase, so ``"UserAuth"``
    becomes ``"Userauth"``.
    """
    collapsed = _WHITESPACE_RE.sub(" ", value)
    return "".join(
        word[0].translate(_ASCII_UPPER) + word[1:].translate(_ASCII_LOWER)
        for word in _WORD_SPLIT_RE.split(collapsed)
        if word
    )
