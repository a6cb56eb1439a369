"""
Parser for pasted card lists.

Accepts one card per line, optionally prefixed with a quantity:
    - "Lightning Bolt"
    - "4 Lightning Bolt"
    - "4x Lightning Bolt"
    - "x Lightning Bolt"

Quantities are discarded; only the set of names matters for a query check.
"""

import re

# Pattern: optional digits, optional "x", optional whitespace, then the name.
# Every line matches (all prefix parts are optional), so a line without a
# quantity comes back whole.
# Groups: (card_name)
QUANTITY_PREFIX_PATTERN = re.compile(r"\d*x?\s*(.*)")


def strip_quantity_prefix(line: str) -> str:
    """Remove a leading quantity such as "4 " or "4x " from a card line."""
    match = QUANTITY_PREFIX_PATTERN.match(line)
    if not match:
        return line
    return match.group(1)


def _encodable(name: str) -> str:
    """Replace characters that cannot be encoded as UTF-8 (lone surrogates)."""
    return name.encode("utf-8", errors="replace").decode("utf-8")


def parse_card_list(text: str) -> list[str]:
    """
    Parse a newline-delimited card list into normalized card names.

    Names are lower-cased and trimmed, empty lines are dropped, and
    duplicates collapse to their first appearance. Characters that cannot
    be sent to Scryfall as UTF-8 become "?".

    Args:
        text: Raw card list text (one card per line)

    Returns:
        Unique lower-cased card names in order of first appearance.
    """
    names: list[str] = []
    seen: set[str] = set()

    for line in text.split("\n"):
        name = _encodable(strip_quantity_prefix(line.strip()).strip().lower())
        if not name or name in seen:
            continue
        seen.add(name)
        names.append(name)

    return names
