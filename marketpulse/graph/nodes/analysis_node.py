"""Positioning analysis node for the pipeline graph."""

from typing import Any

from marketpulse.agents.positioning_agent import PositioningAgent
from marketpulse.exceptions.stage_error import PipelineStage
from marketpulse.graph.nodes.base_node import StageNode, stage_error_handler
from marketpulse.graph.state import PipelineState


def create_analysis_node(config: dict[str, Any]) -> StageNode:
    """Create the positioning analysis node function.
    
    Args:
        config: Configuration dictionary for the PositioningAgent
    
    Returns:
        Node function that takes PipelineState and returns state updates
    """
    agent = PositioningAgent(config=config)
    
    @stage_error_handler(PipelineStage.ANALYSIS)
    def analysis_node(state: PipelineState) -> dict[str, Any]:
        return agent.execute(state)
    
    return analysis_node
