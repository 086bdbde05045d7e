"""Analysis model for classified competitor positioning.

This module defines the CompetitorAnalysis Pydantic model together with the
ThreatLevel and Positioning enums it is classified into.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ThreatLevel(str, Enum):
    """Competitive pressure tier derived from market share."""
    
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Positioning(str, Enum):
    """Competitive stance label derived from pricing tier."""
    
    PREMIUM_LEADER = "Premium market leader"
    VALUE_CHALLENGER = "Value-focused challenger"
    ENTERPRISE_SPECIALIST = "Enterprise specialist"
    UNDIFFERENTIATED = "Undifferentiated"


class CompetitorAnalysis(BaseModel):
    """Classified positioning of one competitor.
    
    Produced 1:1 from a CompetitorRecord. ``opportunities`` has one entry per
    source weakness and ``risks`` one entry per source strength, in source
    order.
    
    Attributes:
        competitor_name: Name copied from the source record
        threat_level: Tier derived from market share
        positioning: Label derived from pricing tier
        key_differentiators: Source strengths, verbatim
        opportunities: One templated opportunity per weakness
        risks: One templated risk per strength
    """
    
    model_config = {"extra": "forbid", "frozen": True}
    
    competitor_name: str = Field(
        ...,
        description="Competitor company name",
    )
    
    threat_level: ThreatLevel = Field(
        ...,
        description="Threat level derived from market share",
    )
    
    positioning: Positioning = Field(
        ...,
        description="Market positioning derived from pricing tier",
    )
    
    key_differentiators: list[str] = Field(
        default_factory=list,
        description="Competitor strengths, copied verbatim",
    )
    
    opportunities: list[str] = Field(
        default_factory=list,
        description="Opportunities derived from competitor weaknesses",
    )
    
    risks: list[str] = Field(
        default_factory=list,
        description="Risks derived from competitor strengths",
    )
