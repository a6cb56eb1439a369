from cardcheck.models.report import (
    ERROR_NOTICE,
    BatchFailure,
    CheckReport,
    MatchOutcome,
)

__all__ = [
    "ERROR_NOTICE",
    "BatchFailure",
    "CheckReport",
    "MatchOutcome",
]
