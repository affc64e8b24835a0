"""Split free-form shopping list text into item names."""

import re

# Period is deliberately not a delimiter so "1.5 kg flour" stays intact.
ITEM_DELIMITERS = ",;\n"

_DELIMITER_RE = re.compile(f"[{re.escape(ITEM_DELIMITERS)}]")


def split_items(text: str) -> list[str]:
    """
    Split text on commas, semicolons and newlines.

    Fragments are stripped of surrounding whitespace and empty fragments are
    dropped; the original order is kept.

    Example:
        >>> split_items("Bread, milk;\\n 1.5 kg potatoes,,")
        ['Bread', 'milk', '1.5 kg potatoes']
    """
    if not text:
        return []
    return [fragment.strip() for fragment in _DELIMITER_RE.split(text) if fragment.strip()]
