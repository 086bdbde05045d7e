"""LangGraph workflow builder for the competitor intelligence pipeline.

This module builds the StateGraph that runs the three stages strictly in
sequence:

    market_research -> positioning_analysis -> report_synthesis -> END

After every stage a conditional edge checks for a recorded failure and
routes straight to END, so later stages never run after a failure.
"""

import logging
from typing import Any

from langgraph.graph import END, StateGraph

from marketpulse.exceptions.stage_error import PipelineStage
from marketpulse.graph.nodes.analysis_node import create_analysis_node
from marketpulse.graph.nodes.market_research_node import \
    create_market_research_node
from marketpulse.graph.nodes.report_node import create_report_node
from marketpulse.graph.state import PipelineState
from marketpulse.providers.base_provider import CompetitorDataProvider

logger = logging.getLogger(__name__)


def create_workflow(
    provider: CompetitorDataProvider,
    config: dict[str, Any],
) -> Any:
    """Create and compile the pipeline graph.

    Args:
        provider: Competitor data provider used by the market research stage
        config: Configuration dictionary shared by the stage agents:
            - max_competitors: Upper bound on acquired records (default: 3)

    Returns:
        Compiled StateGraph ready for execution
    """
    acquisition = PipelineStage.ACQUISITION.value
    analysis = PipelineStage.ANALYSIS.value
    synthesis = PipelineStage.SYNTHESIS.value

    graph = StateGraph(PipelineState)

    graph.add_node(acquisition, create_market_research_node(provider=provider, config=config))
    graph.add_node(analysis, create_analysis_node(config=config))
    graph.add_node(synthesis, create_report_node(config=config))

    graph.set_entry_point(acquisition)

    graph.add_conditional_edges(
        acquisition,
        lambda state: _continue_or_end(state, analysis),
        {analysis: analysis, END: END},
    )
    graph.add_conditional_edges(
        analysis,
        lambda state: _continue_or_end(state, synthesis),
        {synthesis: synthesis, END: END},
    )
    graph.add_edge(synthesis, END)

    logger.debug(f"Pipeline graph built with provider {provider.name}")

    return graph.compile()


def _continue_or_end(state: PipelineState, next_node: str) -> str:
    """Route to the next stage unless the previous one recorded a failure.

    Args:
        state: Pipeline state after the previous stage
        next_node: Name of the stage to run next

    Returns:
        next_node, or END when state holds an error
    """
    error = state.get("error")
    if error is not None:
        logger.info(f"Stopping pipeline before {next_node}: {error}")
        return END
    return next_node
