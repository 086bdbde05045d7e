"""Pipeline stage agents.

- MarketResearchAgent: acquires competitor records from a provider
- PositioningAgent: classifies each competitor's threat and positioning
- ReportAgent: assembles the final report
"""

from marketpulse.agents.base_agent import BaseAgent
from marketpulse.agents.market_research_agent import MarketResearchAgent
from marketpulse.agents.positioning_agent import PositioningAgent
from marketpulse.agents.report_agent import ReportAgent

__all__ = [
    "BaseAgent",
    "MarketResearchAgent",
    "PositioningAgent",
    "ReportAgent",
]
