"""Positioning agent for classifying competitors.

This agent is the analysis stage of the pipeline. Each competitor record is
classified independently into a threat level (from market share) and a
positioning (from pricing tier), and its strengths and weaknesses are
turned into risks and opportunities.
"""

import logging
from typing import Any

from marketpulse.agents.base_agent import BaseAgent
from marketpulse.graph.state import PipelineState
from marketpulse.models.analysis_model import (CompetitorAnalysis,
                                               Positioning, ThreatLevel)
from marketpulse.models.competitor_record import CompetitorRecord

logger = logging.getLogger(__name__)

HIGH_THREAT_SHARE = 20.0
MEDIUM_THREAT_SHARE = 10.0

PRICING_POSITIONING = {
    "Premium": Positioning.PREMIUM_LEADER,
    "Mid-range": Positioning.VALUE_CHALLENGER,
    "Enterprise": Positioning.ENTERPRISE_SPECIALIST,
}

OPPORTUNITY_TEMPLATE = "Capitalize on {} weakness"
RISK_TEMPLATE = "Competitor's {} advantage"


def classify_threat(market_share: float) -> ThreatLevel:
    """Classify threat level from market share.
    
    Boundaries belong to the lower tier: 20.0 is Medium, 10.0 is Low.
    
    Args:
        market_share: Market share percentage
    
    Returns:
        High above 20, Medium above 10, Low otherwise
    """
    if market_share > HIGH_THREAT_SHARE:
        return ThreatLevel.HIGH
    if market_share > MEDIUM_THREAT_SHARE:
        return ThreatLevel.MEDIUM
    return ThreatLevel.LOW


def classify_positioning(pricing: str) -> Positioning:
    """Classify positioning by exact match on the pricing tier."""
    return PRICING_POSITIONING.get(pricing, Positioning.UNDIFFERENTIATED)


def analyze_competitor(record: CompetitorRecord) -> CompetitorAnalysis:
    """Analyze a single competitor record.
    
    Args:
        record: Competitor record to analyze
    
    Returns:
        CompetitorAnalysis with one opportunity per weakness and one risk
        per strength, in source order
    """
    return CompetitorAnalysis(
        competitor_name=record.name,
        threat_level=classify_threat(record.market_share),
        positioning=classify_positioning(record.pricing),
        key_differentiators=list(record.strengths),
        opportunities=[OPPORTUNITY_TEMPLATE.format(weakness) for weakness in record.weaknesses],
        risks=[RISK_TEMPLATE.format(strength) for strength in record.strengths],
    )


class PositioningAgent(BaseAgent):
    """Agent that classifies competitor records into analyses."""
    
    @property
    def name(self) -> str:
        return "positioning_agent"
    
    def execute(self, state: PipelineState) -> dict[str, Any]:
        return {"analyses": self.analyze(state.get("records") or [])}
    
    def analyze(self, records: list[CompetitorRecord]) -> list[CompetitorAnalysis]:
        """Analyze competitor records, preserving their order.
        
        Args:
            records: Competitor records; an empty list is valid
        
        Returns:
            New list with one analysis per record
        """
        analyses = [analyze_competitor(record) for record in records]
        
        threat_counts = {level.value: 0 for level in ThreatLevel}
        for analysis in analyses:
            threat_counts[analysis.threat_level.value] += 1
        logger.info(
            f"Positioning analysis completed: {len(analyses)} competitors "
            f"(threat levels: {threat_counts})"
        )
        return analyses
