"""Base node utilities for consistent stage error handling.

This module provides the decorator every stage node is wrapped with. It
makes sure that:
- A set cancellation event stops the run before the stage starts
- Any exception raised by the stage is tagged with the stage label
- Failures are logged and recorded in the state, never swallowed; the
  orchestrator re-raises the recorded failure
"""

import logging
from functools import wraps
from typing import Any, Callable

from marketpulse.exceptions.stage_error import (PipelineCancelledError,
                                                PipelineStage, StageError)
from marketpulse.graph.state import PipelineState

logger = logging.getLogger(__name__)

StageNode = Callable[[PipelineState], dict[str, Any]]


def stage_error_handler(stage: PipelineStage) -> Callable[[StageNode], StageNode]:
    """Decorator for consistent stage node error handling.
    
    Args:
        stage: Stage the wrapped node implements
    
    Returns:
        Decorator function that wraps the node function
    
    Example:
        ```python
        @stage_error_handler(PipelineStage.ANALYSIS)
        def analysis_node(state: PipelineState) -> dict[str, Any]:
            return {"analyses": agent.analyze(state["records"])}
        ```
    """
    def decorator(func: StageNode) -> StageNode:
        
        @wraps(func)
        def wrapper(state: PipelineState) -> dict[str, Any]:
            cancel_event = state.get("cancel_event")
            if cancel_event is not None and cancel_event.is_set():
                logger.warning(f"Pipeline cancelled before {stage.label}")
                return {"error": PipelineCancelledError(stage)}
            
            try:
                return func(state)
            except Exception as e:
                logger.error(f"{stage.label} failed: {e}", exc_info=True)
                error = StageError(stage, e)
                error.__cause__ = e
                return {"error": error}
        
        return wrapper
    
    return decorator
