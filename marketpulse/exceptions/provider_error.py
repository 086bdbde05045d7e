"""Provider error exception.

This module defines the ProviderError exception raised when a competitor
data provider cannot produce records. Every source-specific failure
(timeout, rate limit, unknown company, malformed payload) is mapped onto
this single type so the orchestrator has one thing to surface.
"""

from marketpulse.exceptions.base import BaseWorkflowError

PROVIDER_ERROR_KINDS = frozenset({
    "timeout",
    "rate_limited",
    "not_found",
    "unavailable",
    "invalid_response",
})


class ProviderError(BaseWorkflowError):
    """Raised when competitor data acquisition fails.
    
    Attributes:
        kind: Failure category, one of PROVIDER_ERROR_KINDS
    """
    
    def __init__(
        self,
        message: str,
        kind: str = "unavailable",
        context: dict | None = None
    ) -> None:
        if kind not in PROVIDER_ERROR_KINDS:
            raise ValueError(
                f"kind must be one of {sorted(PROVIDER_ERROR_KINDS)}, got {kind!r}"
            )
        super().__init__(message, context={**(context or {}), "kind": kind})
        self.kind = kind
