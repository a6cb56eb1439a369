from dataclasses import dataclass, field
from enum import Enum

ERROR_NOTICE = "There was an error trying to query Scryfall; check logs for details"


class MatchOutcome(str, Enum):
    """Overall classification of a card check."""

    ALL_MATCHED = "all_matched"
    NO_MATCHES = "no_matches"
    PARTIAL = "partial"


@dataclass
class BatchFailure:
    """
    A search request that could not be completed.

    Attributes:
        query: Encoded query that was sent
        status_code: HTTP status, or None for transport errors
        message: Short description for logs and responses
    """

    query: str
    status_code: int | None
    message: str


@dataclass
class CheckReport:
    """
    Result of checking card names against a search query.

    Attributes:
        total: Number of unique names checked
        found: Card names returned by Scryfall, in discovery order and with
            Scryfall's casing. One entry per printing, so duplicates occur.
        missing: Normalized names no search returned
        batches: Number of search requests issued
        failures: Requests that failed; their names stay in missing
    """

    total: int
    found: list[str] = field(default_factory=list)
    missing: set[str] = field(default_factory=set)
    batches: int = 0
    failures: list[BatchFailure] = field(default_factory=list)

    @property
    def outcome(self) -> MatchOutcome:
        if not self.missing:
            return MatchOutcome.ALL_MATCHED
        if len(self.missing) == self.total:
            return MatchOutcome.NO_MATCHES
        return MatchOutcome.PARTIAL

    @property
    def has_errors(self) -> bool:
        return bool(self.failures)

    def sorted_missing(self) -> list[str]:
        """Missing names in a stable order for display."""
        return sorted(self.missing)

    def render(self) -> str:
        """Render the report as the text shown to the user."""
        outcome = self.outcome
        if outcome is MatchOutcome.ALL_MATCHED:
            text = "All cards matched query."
        elif outcome is MatchOutcome.NO_MATCHES:
            text = "No cards matched query."
        else:
            found_text = "\n".join(self.found)
            missing_text = "\n".join(self.sorted_missing())
            text = f"Mixed results.\n\nFound cards:\n{found_text}\n\nMissing cards:\n{missing_text}"

        if self.has_errors:
            return f"{ERROR_NOTICE}\n\n{text}"
        return text
