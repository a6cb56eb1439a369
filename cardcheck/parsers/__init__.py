from cardcheck.parsers.card_list import (
    QUANTITY_PREFIX_PATTERN,
    parse_card_list,
    strip_quantity_prefix,
)

__all__ = [
    "QUANTITY_PREFIX_PATTERN",
    "parse_card_list",
    "strip_quantity_prefix",
]
