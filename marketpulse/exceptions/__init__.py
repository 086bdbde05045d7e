"""Custom exception classes for the competitor intelligence pipeline.

This package contains the exception hierarchy:
- BaseWorkflowError: Base exception for all pipeline errors
- ProviderError: Raised when a competitor data source fails
- StageError: Raised when a pipeline stage fails, tagged with the stage
- PipelineCancelledError: Raised when a run is cancelled between stages
"""

from marketpulse.exceptions.base import BaseWorkflowError
from marketpulse.exceptions.provider_error import ProviderError
from marketpulse.exceptions.stage_error import (PipelineCancelledError,
                                                PipelineStage, StageError)

__all__ = [
    "BaseWorkflowError",
    "ProviderError",
    "StageError",
    "PipelineStage",
    "PipelineCancelledError",
]
