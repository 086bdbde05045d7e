"""Stage failure exceptions.

This module defines the errors the orchestrator surfaces to its callers:
StageError wraps whatever a stage raised with the stage's human-readable
label, and PipelineCancelledError reports a run aborted between stages.
"""

from enum import Enum

from marketpulse.exceptions.base import BaseWorkflowError


class PipelineStage(str, Enum):
    """The three pipeline stages, valued by their graph node names."""
    
    ACQUISITION = "market_research"
    ANALYSIS = "positioning_analysis"
    SYNTHESIS = "report_synthesis"
    
    @property
    def label(self) -> str:
        """Human-readable label used as the failure message prefix."""
        return _STAGE_LABELS[self]


_STAGE_LABELS = {
    PipelineStage.ACQUISITION: "market research",
    PipelineStage.ANALYSIS: "analysis",
    PipelineStage.SYNTHESIS: "report generation",
}


class StageError(BaseWorkflowError):
    """Raised when a pipeline stage fails.
    
    The message has the form ``"<stage label> failed: <cause>"``, e.g.
    ``"market research failed: upstream timed out"``.
    
    Attributes:
        stage: Stage that failed
        cause: Original exception raised by the stage
    """
    
    def __init__(
        self,
        stage: PipelineStage,
        cause: Exception,
        context: dict | None = None
    ) -> None:
        message = f"{stage.label} failed: {cause}"
        super().__init__(
            message,
            context={
                **(context or {}),
                "stage": stage.value,
                "error_type": type(cause).__name__,
            }
        )
        self.stage = stage
        self.cause = cause


class PipelineCancelledError(BaseWorkflowError):
    """Raised when a run is cancelled before a stage starts.
    
    Attributes:
        stage: Stage that was about to run when cancellation was observed
    """
    
    def __init__(self, stage: PipelineStage) -> None:
        super().__init__(
            f"pipeline cancelled before {stage.label}",
            context={"stage": stage.value}
        )
        self.stage = stage
