# Creator category normalization

import re
from typing import Iterable, List, Optional, Union

MAX_CATEGORIES = 20

_SEPARATORS = re.compile(r"[;,|]")


def normalize_categories(value: Optional[Union[str, Iterable]]) -> List[str]:
    """
    Lowercase, trim and deduplicate categories, keeping first-seen order.

    Accepts a list or a single string delimited by ``,``, ``;`` or ``|``.
    """
    if not value:
        return []
    if isinstance(value, str):
        raw = _SEPARATORS.split(value)
    else:
        raw = [str(item) for item in value]

    seen = []
    for item in raw:
        cleaned = item.strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen[:MAX_CATEGORIES]
