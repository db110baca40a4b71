from __future__ import annotations

import re


def normalize_name(text: str, max_length: int = 19) -> str:
    """
    Turns raw input into an organism name.

    Names are single tokens: surrounding whitespace is dropped, inner
    whitespace runs become underscores and the result is truncated.
    """
    text = re.sub(r"\s+", "_", text.strip())
    return text[:max_length]
