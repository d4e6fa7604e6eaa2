from __future__ import annotations

import re
from typing import List

from .types import TextToken

# Whitespace as ECMAScript defines it: U+FEFF separates tokens, while the
# information separators U+001C..U+001F and U+0085 do not.
_WHITESPACE = (
    r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    r"\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_TOKEN_RE = re.compile("[^" + _WHITESPACE + "]+")


def tokenize(text: str) -> List[TextToken]:
    """Split ``text`` into whitespace separated tokens with their offsets."""

    return [
        TextToken(value=match.group(0), start=match.start(), end=match.end())
        for match in _TOKEN_RE.finditer(text)
    ]
