"""
Card check endpoint.

Takes the two page inputs (search query and pasted card list) and returns
the check report as structured data plus the rendered text.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from cardcheck.models.report import CheckReport, MatchOutcome
from cardcheck.services.reconciler import check_card_list

router = APIRouter(tags=["check"])


class CheckRequest(BaseModel):
    """Request model for a card check."""

    query: str = Field(
        ...,
        description="Scryfall search expression without a name filter",
        examples=["f:pauper"],
    )
    card_list: str = Field(
        ...,
        description="One card per line, optionally prefixed with a quantity",
        examples=["4 Lightning Bolt\n4x Counterspell\nForest"],
    )


class BatchFailureResponse(BaseModel):
    """A search request that failed during the check."""

    query: str
    status_code: int | None = None
    message: str


class CheckResponse(BaseModel):
    """Response model for a card check."""

    outcome: MatchOutcome
    total: int = Field(..., description="Unique card names checked")
    found: list[str] = Field(
        default_factory=list,
        description="Matched card names as returned by Scryfall (one per printing)",
    )
    missing: list[str] = Field(
        default_factory=list,
        description="Normalized card names not returned by any search",
    )
    batches: int = Field(..., description="Search requests issued")
    failures: list[BatchFailureResponse] = Field(default_factory=list)
    text: str = Field(..., description="Human-readable report")


def report_to_response(report: CheckReport) -> CheckResponse:
    """Convert a CheckReport to its API representation."""
    return CheckResponse(
        outcome=report.outcome,
        total=report.total,
        found=report.found,
        missing=report.sorted_missing(),
        batches=report.batches,
        failures=[
            BatchFailureResponse(
                query=failure.query,
                status_code=failure.status_code,
                message=failure.message,
            )
            for failure in report.failures
        ],
        text=report.render(),
    )


@router.post("/check", response_model=CheckResponse)
async def check(request: CheckRequest) -> CheckResponse:
    """
    Check whether every card in the list matches the query.

    Always returns 200. Failed Scryfall requests are listed in `failures`
    and flagged in `text`; their cards are reported as missing.
    """
    report = await check_card_list(request.card_list, request.query)
    return report_to_response(report)
