"""
Query batcher.

Builds Scryfall search queries that check a list of card names against a
base query. Each query has the form:

    <base query> (!name one or !name two or ...)

Scryfall limits how long a search URL may be, so the name filter is split
across as many queries as needed to keep each encoded query under the limit.
"""

from collections.abc import Iterable, Sequence
from urllib.parse import quote

from cardcheck.config import MAX_QUERY_LENGTH

# Characters left unescaped by JavaScript's encodeURIComponent, in addition to
# ASCII letters and digits (which quote never escapes)
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_query_component(text: str) -> str:
    """Percent-encode text the way a browser's encodeURIComponent does."""
    return quote(text, safe=_URI_COMPONENT_SAFE, encoding="utf-8", errors="replace")


def exact_name_clause(name: str) -> str:
    """Scryfall exact-name clause for a single card."""
    return f"!{name}"


def name_filter(names: Iterable[str]) -> str:
    """Join exact-name clauses into a single disjunction."""
    return " or ".join(exact_name_clause(name) for name in names)


def _encode_batch(base_query: str, fragment: str) -> str:
    return encode_query_component(f"{base_query} ({fragment})")


def build_batches(
    base_query: str,
    names: Sequence[str],
    max_length: int = MAX_QUERY_LENGTH,
) -> list[str]:
    """
    Split a name list into encoded search queries under a length limit.

    Names are consumed in order. A name is added to the current query while
    the encoded result stays below max_length; otherwise the current query
    is finished and a new one starts with that name.

    Args:
        base_query: Scryfall search expression without a name filter
        names: Card names to check, in the order they should be batched
        max_length: Encoded queries must be strictly shorter than this

    Returns:
        Encoded queries. Every name appears in exactly one of them.
        Empty list if there are no names.

    Note:
        A single name too long to fit under the limit on its own is still
        emitted as its own (oversized) query.
    """
    batches: list[str] = []
    fragment = ""

    for name in names:
        clause = exact_name_clause(name)
        candidate = f"{fragment} or {clause}" if fragment else clause

        if len(_encode_batch(base_query, candidate)) >= max_length and fragment:
            batches.append(_encode_batch(base_query, fragment))
            fragment = clause
        else:
            fragment = candidate

    if fragment:
        batches.append(_encode_batch(base_query, fragment))

    return batches
