"""Market research node for the pipeline graph."""

from typing import Any

from marketpulse.agents.market_research_agent import MarketResearchAgent
from marketpulse.exceptions.stage_error import PipelineStage
from marketpulse.graph.nodes.base_node import StageNode, stage_error_handler
from marketpulse.graph.state import PipelineState
from marketpulse.providers.base_provider import CompetitorDataProvider


def create_market_research_node(
    provider: CompetitorDataProvider,
    config: dict[str, Any],
) -> StageNode:
    """Create the market research node function.
    
    The node is a closure over a MarketResearchAgent built once from the
    injected provider and config. The agent is stateless, so the node can
    serve concurrent runs.
    
    Args:
        provider: Competitor data provider for the agent
        config: Configuration dictionary for the agent
    
    Returns:
        Node function that takes PipelineState and returns state updates
    """
    agent = MarketResearchAgent(provider=provider, config=config)
    
    @stage_error_handler(PipelineStage.ACQUISITION)
    def market_research_node(state: PipelineState) -> dict[str, Any]:
        return agent.execute(state)
    
    return market_research_node
