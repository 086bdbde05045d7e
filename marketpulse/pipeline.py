"""Competitor intelligence pipeline orchestrator.

This module provides CompetitorIntelligencePipeline, which runs the stage
graph end to end and turns the final graph state into either a report or
the stage-tagged failure.

Example:
    ```python
    from marketpulse.pipeline import CompetitorIntelligencePipeline

    pipeline = CompetitorIntelligencePipeline()
    report = pipeline.run("TechStartup", "SaaS")
    print(report.to_json())
    ```
"""

import logging
from threading import Event
from typing import Any

from marketpulse.config import Config, get_config
from marketpulse.exceptions.stage_error import PipelineStage, StageError
from marketpulse.graph.state import create_initial_state
from marketpulse.graph.workflow import create_workflow
from marketpulse.models.report_model import CompetitorReport
from marketpulse.providers import create_provider
from marketpulse.providers.base_provider import CompetitorDataProvider
from marketpulse.providers.sample_provider import SampleDataProvider

logger = logging.getLogger(__name__)


class CompetitorIntelligencePipeline:
    """Runs market research, positioning analysis and report synthesis.

    The graph is compiled once per instance. No per-run data is kept on the
    instance, so one pipeline can serve concurrent runs.

    Attributes:
        provider: Competitor data provider used for market research
        config: Configuration dictionary passed to the stage agents
    """

    def __init__(
        self,
        provider: CompetitorDataProvider | None = None,
        config: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            provider: Competitor data provider. Defaults to SampleDataProvider.
            config: Configuration dictionary for the stage agents
        """
        self.provider = provider if provider is not None else SampleDataProvider()
        self.config = dict(config or {})
        self._graph = create_workflow(provider=self.provider, config=self.config)

    @classmethod
    def from_config(cls, config: Config | None = None) -> "CompetitorIntelligencePipeline":
        """Build a pipeline from application configuration.

        Args:
            config: Optional Config instance. If not provided, uses get_config()

        Returns:
            Pipeline using the configured provider and competitor bound
        """
        if config is None:
            config = get_config()
        return cls(
            provider=create_provider(config),
            config={"max_competitors": config.max_competitors},
        )

    def run(
        self,
        company_name: str,
        industry: str,
        cancel_event: Event | None = None,
    ) -> CompetitorReport:
        """Run the full pipeline for one query.

        Args:
            company_name: Company to build the report for (empty allowed)
            industry: Industry label (empty allowed)
            cancel_event: Optional event; once set, no further stage starts

        Returns:
            CompetitorReport produced by the report synthesis stage

        Raises:
            StageError: If a stage fails; the message starts with the stage
                label, e.g. "market research failed: ..."
            PipelineCancelledError: If cancel_event was set before a stage
        """
        logger.info(
            f"Running competitor analysis for {company_name!r} in {industry!r}"
        )

        initial_state = create_initial_state(
            company_name=company_name,
            industry=industry,
            cancel_event=cancel_event,
        )
        final_state = self._graph.invoke(initial_state)

        error = final_state.get("error")
        if error is not None:
            raise error

        report = final_state.get("report")
        if report is None:
            raise StageError(
                PipelineStage.SYNTHESIS,
                RuntimeError("no report was produced"),
            )
        return report
