"""
Card check reconciler.

Runs the batched name queries against Scryfall's search endpoint and
reconciles the returned cards with the requested names.

Failed requests never abort a check: the failure is logged and recorded on
the report, the affected names stay missing, and remaining batches still run.
"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from cardcheck.config import Settings, settings as default_settings
from cardcheck.models.report import BatchFailure, CheckReport
from cardcheck.parsers.card_list import parse_card_list
from cardcheck.services.query_batcher import build_batches

logger = logging.getLogger(__name__)

# Scryfall answers a search with no results with a 404 error object
_NOT_FOUND_STATUS = 404


class _BatchError(Exception):
    """Raised internally when a single search request fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


def _is_not_found(payload: Any) -> bool:
    return isinstance(payload, dict) and payload.get("status") == _NOT_FOUND_STATUS


async def _search(client: httpx.AsyncClient, search_url: str, query: str) -> list[str]:
    """
    Run one search request and return the card names it matched.

    Args:
        client: HTTP client to send the request with
        search_url: Scryfall search endpoint
        query: Already percent-encoded query string

    Returns:
        Card names in response order (empty if nothing matched)

    Raises:
        _BatchError: If the request fails or the response is unusable
    """
    try:
        response = await client.get(f"{search_url}?q={query}")
    except httpx.RequestError as e:
        raise _BatchError(f"Request to Scryfall failed: {e}") from e

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if _is_not_found(payload):
        return []

    if not response.is_success:
        logger.debug("Scryfall error response: %r %s", response, response.text[:500])
        raise _BatchError(
            f"Scryfall returned HTTP {response.status_code}",
            status_code=response.status_code,
        )

    if not isinstance(payload, dict):
        raise _BatchError("Scryfall returned a non-JSON response", response.status_code)

    cards = payload.get("data", [])
    if not isinstance(cards, list) or not all(
        isinstance(card, dict) and isinstance(card.get("name"), str) for card in cards
    ):
        raise _BatchError("Scryfall returned an unexpected response", response.status_code)

    return [card["name"] for card in cards]


async def check_cards(
    names: Sequence[str],
    base_query: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: Settings | None = None,
) -> CheckReport:
    """
    Check which card names are returned by a Scryfall search query.

    Args:
        names: Card names to look for. Trimmed, lower-cased and de-duplicated
            before batching; blank names are dropped.
        base_query: Scryfall search expression. Must not contain a name filter.
        client: Optional httpx client for connection reuse
        config: Settings override (defaults to the module settings)

    Returns:
        CheckReport classifying the outcome. Never raises for request
        failures; those are recorded in report.failures.
    """
    config = config or default_settings
    unique_names = list(dict.fromkeys(name.strip().lower() for name in names if name.strip()))
    queries = build_batches(base_query, unique_names, max_length=config.max_query_length)

    report = CheckReport(total=len(unique_names), missing=set(unique_names), batches=len(queries))

    if client is None:
        async with httpx.AsyncClient(
            timeout=config.request_timeout,
            headers={"User-Agent": config.user_agent},
        ) as owned_client:
            await _run_batches(owned_client, config.scryfall_search_url, queries, report)
    else:
        await _run_batches(client, config.scryfall_search_url, queries, report)

    logger.info(
        "Card check finished: %s (%d checked, %d missing, %d failed requests)",
        report.outcome.value,
        report.total,
        len(report.missing),
        len(report.failures),
    )
    return report


async def _run_batches(
    client: httpx.AsyncClient,
    search_url: str,
    queries: list[str],
    report: CheckReport,
) -> None:
    for index, query in enumerate(queries, start=1):
        logger.debug("Searching batch %d/%d (%d chars)", index, len(queries), len(query))
        try:
            card_names = await _search(client, search_url, query)
        except _BatchError as e:
            logger.error("Batch %d/%d failed: %s", index, len(queries), e)
            report.failures.append(
                BatchFailure(query=query, status_code=e.status_code, message=str(e))
            )
            continue

        for card_name in card_names:
            report.missing.discard(card_name.lower())
            report.found.append(card_name)


async def check_card_list(
    card_list: str,
    base_query: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: Settings | None = None,
) -> CheckReport:
    """Parse a pasted card list and check it against a search query."""
    names = parse_card_list(card_list)
    return await check_cards(names, base_query, client=client, config=config)
