"""Report synthesis node for the pipeline graph."""

from typing import Any

from marketpulse.agents.report_agent import ReportAgent
from marketpulse.exceptions.stage_error import PipelineStage
from marketpulse.graph.nodes.base_node import StageNode, stage_error_handler
from marketpulse.graph.state import PipelineState


def create_report_node(config: dict[str, Any]) -> StageNode:
    """Create the report synthesis node function.
    
    Args:
        config: Configuration dictionary for the ReportAgent
    
    Returns:
        Node function that takes PipelineState and returns state updates
    """
    agent = ReportAgent(config=config)
    
    @stage_error_handler(PipelineStage.SYNTHESIS)
    def report_node(state: PipelineState) -> dict[str, Any]:
        return agent.execute(state)
    
    return report_node
