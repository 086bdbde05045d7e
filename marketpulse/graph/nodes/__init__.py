"""Stage node factories for the pipeline graph."""

from marketpulse.graph.nodes.analysis_node import create_analysis_node
from marketpulse.graph.nodes.market_research_node import \
    create_market_research_node
from marketpulse.graph.nodes.report_node import create_report_node

__all__ = [
    "create_market_research_node",
    "create_analysis_node",
    "create_report_node",
]
