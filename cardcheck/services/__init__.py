"""
CardCheck services.

Query batching and result reconciliation against Scryfall search.
"""

from cardcheck.services.query_batcher import (
    build_batches,
    encode_query_component,
    exact_name_clause,
    name_filter,
)
from cardcheck.services.reconciler import check_card_list, check_cards

__all__ = [
    "build_batches",
    "check_card_list",
    "check_cards",
    "encode_query_component",
    "exact_name_clause",
    "name_filter",
]
