"""
Failure Envelope: Classified Error Responses.

Every failure that reaches an API caller is classified and explained through
the ApiResponse envelope defined here.

Response types:
- KnownFailure: System knows why it failed (bad deck code, unknown card)
- UnknownFailure: System does not know why it failed

All envelopes returned to callers pass through `finalize_response()`.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Deck code failures
    EMPTY_CODE = "empty_code"
    MALFORMED_ENTRY = "malformed_entry"
    INVALID_QUANTITY = "invalid_quantity"
    UNKNOWN_CARD = "unknown_card"

    # Resource failures
    NOT_FOUND = "not_found"
    CATALOG_INVALID = "catalog_invalid"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel):
    """
    Response envelope for API failures.

    Every failure is classified into a known or unknown outcome,
    so no failure reaches the user unexplained.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    failure: FailureDetail = Field(
        ...,
        description="Failure details",
    )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: Deck code references a card that is not in the catalog.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse:
        """Convert to a finalized ApiResponse."""
        return finalize_response(
            ApiResponse.known_failure(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            )
        )


# =============================================================================
# RESPONSE BOUNDARY
# =============================================================================

# Standard wording for unknown failures. Does not vary with input.
UNKNOWN_FAILURE_MESSAGE = "Something went wrong and the cause is unknown. Try again."
UNKNOWN_FAILURE_SUGGESTION = "If this persists, please report the issue."


def finalize_response(response: ApiResponse) -> ApiResponse:
    """
    Check a response before it leaves the system.

    An unknown failure must carry FailureKind.UNKNOWN, and a known failure
    must carry a specific kind.

    Raises:
        ValueError: If the outcome and the failure kind disagree
    """
    is_unknown_kind = response.failure.kind == FailureKind.UNKNOWN
    if (response.outcome == OutcomeType.UNKNOWN_FAILURE) != is_unknown_kind:
        raise ValueError(
            f"{response.outcome.value} response cannot carry "
            f"failure kind {response.failure.kind.value}"
        )
    return response


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse:
    """
    Create a finalized unknown failure response from an exception.

    The message is fixed; only the exception type name is exposed.
    """
    detail = f"{type(exception).__name__}" if include_type else None

    response = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=UNKNOWN_FAILURE_MESSAGE,
            detail=detail,
            suggestion=UNKNOWN_FAILURE_SUGGESTION,
        ),
    )

    return finalize_response(response)
