"""Pipeline state definition.

This module defines the PipelineState TypedDict that flows through the
stage graph, and a helper to build the initial state for one run. A fresh
state is created per run, so runs never share data.
"""

from threading import Event
from typing import TypedDict

from marketpulse.exceptions.base import BaseWorkflowError
from marketpulse.models.analysis_model import CompetitorAnalysis
from marketpulse.models.competitor_record import CompetitorRecord
from marketpulse.models.report_model import CompetitorReport


class PipelineState(TypedDict, total=False):
    """State passed between pipeline stages.
    
    Attributes:
        company_name: Queried company name
        industry: Queried industry label
        records: Competitor records from market research
        analyses: Competitor analyses from positioning analysis
        report: Final report from report synthesis
        error: Failure recorded by the stage that failed, if any
        cancel_event: Optional cancellation signal checked before each stage
    """
    
    company_name: str
    industry: str
    records: list[CompetitorRecord] | None
    analyses: list[CompetitorAnalysis] | None
    report: CompetitorReport | None
    error: BaseWorkflowError | None
    cancel_event: Event | None


def create_initial_state(
    company_name: str = "",
    industry: str = "",
    cancel_event: Event | None = None,
) -> PipelineState:
    """Create the initial state for a pipeline run.
    
    Args:
        company_name: Queried company name (empty allowed)
        industry: Queried industry label (empty allowed)
        cancel_event: Optional event; when set, the next stage is not started
    
    Returns:
        PipelineState with no stage outputs yet
    """
    return PipelineState(
        company_name=company_name,
        industry=industry,
        records=None,
        analyses=None,
        report=None,
        error=None,
        cancel_event=cancel_event,
    )
