"""Report agent for synthesizing the final report.

This agent is the last stage of the pipeline. It stamps the generation
time, writes the market insight narrative and attaches the strategic
recommendations.

The recommendations are currently a fixed list that does not depend on the
analyses. A data-driven version would derive them from the threat level and
positioning distribution of the analyzed competitors.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from marketpulse.agents.base_agent import BaseAgent
from marketpulse.graph.state import PipelineState
from marketpulse.models.analysis_model import CompetitorAnalysis
from marketpulse.models.report_model import CompetitorReport

logger = logging.getLogger(__name__)

MARKET_INSIGHTS_TEMPLATE = (
    "The competitive landscape shows {count} major players. "
    "High-threat competitors control significant market share. "
    "Opportunities exist in underserved segments."
)

STRATEGIC_RECOMMENDATIONS: tuple[str, ...] = (
    "Focus on differentiation in areas where competitors are weak",
    "Target mid-market segment with competitive pricing",
    "Invest in customer support to outperform competitors",
    "Develop integrations to match competitor ecosystems",
    "Monitor competitor pricing and adjust strategy quarterly",
)


class ReportAgent(BaseAgent):
    """Agent that assembles the CompetitorReport."""
    
    @property
    def name(self) -> str:
        return "report_agent"
    
    def execute(self, state: PipelineState) -> dict[str, Any]:
        report = self.synthesize(
            state.get("company_name", ""),
            state.get("analyses") or [],
        )
        return {"report": report}
    
    def synthesize(
        self,
        target_company: str,
        analyses: list[CompetitorAnalysis],
    ) -> CompetitorReport:
        """Build the final report.
        
        Two calls with the same inputs produce reports that differ only in
        ``generated_at``.
        
        Args:
            target_company: Company the report is for (empty allowed)
            analyses: Competitor analyses, kept in order
        
        Returns:
            CompetitorReport stamped with the current UTC time
        """
        report = CompetitorReport(
            generated_at=datetime.now(timezone.utc),
            target_company=target_company,
            competitors=list(analyses),
            market_insights=MARKET_INSIGHTS_TEMPLATE.format(count=len(analyses)),
            recommendations=list(STRATEGIC_RECOMMENDATIONS),
        )
        
        logger.info(
            f"Report generated for {target_company!r}: "
            f"{len(report.competitors)} competitors, "
            f"{len(report.recommendations)} recommendations"
        )
        return report
