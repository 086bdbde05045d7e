"""Pydantic models for competitor records, analyses and reports."""

from marketpulse.models.analysis_model import (CompetitorAnalysis,
                                               Positioning, ThreatLevel)
from marketpulse.models.competitor_record import CompetitorRecord
from marketpulse.models.report_model import CompetitorReport

__all__ = [
    "CompetitorRecord",
    "CompetitorAnalysis",
    "ThreatLevel",
    "Positioning",
    "CompetitorReport",
]
