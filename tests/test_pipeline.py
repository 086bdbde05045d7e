"""Tests for the pipeline orchestrator.

This module contains end-to-end tests for CompetitorIntelligencePipeline:
the reference scenarios, stage-tagged failures, cancellation and
concurrent reuse of one instance.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from marketpulse.agents.positioning_agent import PositioningAgent
from marketpulse.agents.report_agent import ReportAgent
from marketpulse.config import Config
from marketpulse.exceptions.base import BaseWorkflowError
from marketpulse.exceptions.provider_error import ProviderError
from marketpulse.exceptions.stage_error import (PipelineCancelledError,
                                                PipelineStage, StageError)
from marketpulse.models.analysis_model import Positioning, ThreatLevel
from marketpulse.models.competitor_record import CompetitorRecord
from marketpulse.models.report_model import CompetitorReport
from marketpulse.pipeline import CompetitorIntelligencePipeline
from marketpulse.providers.base_provider import CompetitorDataProvider
from marketpulse.providers.cache import CachingProvider
from marketpulse.providers.sample_provider import SampleDataProvider

EXPECTED_RECOMMENDATION_PHRASES = [
    "Focus on differentiation",
    "Target mid-market segment",
    "Invest in customer support",
    "Develop integrations",
    "Monitor competitor pricing",
]


class CancellingProvider(CompetitorDataProvider):
    """Provider that requests cancellation while it runs."""
    
    def __init__(self, cancel_event: threading.Event) -> None:
        self.cancel_event = cancel_event
    
    @property
    def name(self) -> str:
        return "cancelling_provider"
    
    def fetch(self, company_name: str, industry: str) -> list[CompetitorRecord]:
        self.cancel_event.set()
        return SampleDataProvider().fetch(company_name, industry)


class TestPipelineScenarios:
    """End-to-end scenarios for a successful run."""
    
    def test_run_tech_startup_saas(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test the reference TechStartup/SaaS report."""
        report = pipeline.run("TechStartup", "SaaS")
        
        assert isinstance(report, CompetitorReport)
        assert report.target_company == "TechStartup"
        assert len(report.competitors) == 3
        assert report.market_insights
        assert "competitive landscape" in report.market_insights
        assert len(report.recommendations) == 5
        for phrase, recommendation in zip(EXPECTED_RECOMMENDATION_PHRASES, report.recommendations):
            assert phrase in recommendation
    
    def test_run_with_empty_inputs(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test that empty company and industry are accepted."""
        report = pipeline.run("", "")
        
        assert report.target_company == ""
        assert len(report.competitors) == 3
    
    def test_run_classifies_sample_competitors(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test the classification of the sample peer set."""
        report = pipeline.run("TechStartup", "SaaS")
        
        first = report.competitors[0]
        assert first.competitor_name == "Competitor A"
        assert first.threat_level is ThreatLevel.HIGH
        assert first.positioning is Positioning.PREMIUM_LEADER
        assert first.opportunities[0] == "Capitalize on High prices weakness"
        assert first.risks[0] == "Competitor's Strong brand advantage"
    
    def test_run_with_premium_record(self, static_provider_factory, premium_record: CompetitorRecord) -> None:
        """Test a 25% premium competitor end to end."""
        pipeline = CompetitorIntelligencePipeline(provider=static_provider_factory(records=[premium_record]))
        
        report = pipeline.run("Acme", "SaaS")
        
        assert report.competitors[0].threat_level is ThreatLevel.HIGH
        assert report.competitors[0].positioning is Positioning.PREMIUM_LEADER
    
    def test_runs_are_independent(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test that a run does not carry data from a previous run."""
        first = pipeline.run("First", "SaaS")
        second = pipeline.run("Second", "Retail")
        
        assert first.target_company == "First"
        assert second.target_company == "Second"
        assert first.competitors == second.competitors
    
    def test_report_json_round_trip(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test that a generated report survives serialization."""
        report = pipeline.run("TechStartup", "SaaS")
        
        assert CompetitorReport.from_json(report.to_json()) == report
    
    def test_default_provider_is_sample(self) -> None:
        """Test that the pipeline defaults to the sample provider."""
        pipeline = CompetitorIntelligencePipeline()
        
        assert isinstance(pipeline.provider, SampleDataProvider)
        assert len(pipeline.run("TechStartup", "SaaS").competitors) == 3
    
    def test_from_config(self) -> None:
        """Test building a pipeline from application configuration."""
        config = Config(_env_file=None, provider_cache_enabled=True, max_competitors=5)
        
        pipeline = CompetitorIntelligencePipeline.from_config(config)
        
        assert isinstance(pipeline.provider, CachingProvider)
        assert pipeline.config == {"max_competitors": 5}


class TestPipelineFailures:
    """Tests for stage-tagged failures."""
    
    def test_acquisition_failure_stops_pipeline(self, static_provider_factory) -> None:
        """Test that a provider failure is tagged and later stages never run."""
        provider = static_provider_factory(error=ProviderError("upstream timed out", kind="timeout"))
        pipeline = CompetitorIntelligencePipeline(provider=provider)
        
        with patch.object(PositioningAgent, "analyze") as mock_analyze, \
                patch.object(ReportAgent, "synthesize") as mock_synthesize:
            with pytest.raises(StageError) as exc_info:
                pipeline.run("Acme", "SaaS")
        
        assert str(exc_info.value) == "market research failed: upstream timed out"
        assert exc_info.value.stage is PipelineStage.ACQUISITION
        assert exc_info.value.cause.kind == "timeout"
        mock_analyze.assert_not_called()
        mock_synthesize.assert_not_called()
    
    def test_analysis_failure_stops_pipeline(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test that an analysis failure skips report synthesis."""
        with patch.object(PositioningAgent, "analyze", side_effect=RuntimeError("bad record")), \
                patch.object(ReportAgent, "synthesize") as mock_synthesize:
            with pytest.raises(StageError) as exc_info:
                pipeline.run("Acme", "SaaS")
        
        assert str(exc_info.value) == "analysis failed: bad record"
        mock_synthesize.assert_not_called()
    
    def test_synthesis_failure_is_tagged(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test that a synthesis failure is tagged with its label."""
        with patch.object(ReportAgent, "synthesize", side_effect=ValueError("no clock")):
            with pytest.raises(StageError) as exc_info:
                pipeline.run("Acme", "SaaS")
        
        assert str(exc_info.value) == "report generation failed: no clock"
        assert exc_info.value.stage is PipelineStage.SYNTHESIS
    
    def test_too_many_records_fails_acquisition(self, static_provider_factory) -> None:
        """Test that the record bound is enforced at the acquisition stage."""
        records = [CompetitorRecord(name=f"C{i}") for i in range(4)]
        pipeline = CompetitorIntelligencePipeline(
            provider=static_provider_factory(records=records),
            config={"max_competitors": 3},
        )
        
        with pytest.raises(StageError) as exc_info:
            pipeline.run("Acme", "SaaS")
        
        assert str(exc_info.value).startswith("market research failed:")


class TestPipelineCancellation:
    """Tests for cancellation between stages."""
    
    def test_cancelled_before_start(self, static_provider_factory) -> None:
        """Test that a pre-set event stops the run before market research."""
        provider = static_provider_factory(records=[])
        pipeline = CompetitorIntelligencePipeline(provider=provider)
        cancel_event = threading.Event()
        cancel_event.set()
        
        with pytest.raises(PipelineCancelledError) as exc_info:
            pipeline.run("Acme", "SaaS", cancel_event=cancel_event)
        
        assert exc_info.value.stage is PipelineStage.ACQUISITION
        assert provider.calls == []
    
    def test_cancelled_during_acquisition(self) -> None:
        """Test that cancellation during a stage stops before the next one."""
        cancel_event = threading.Event()
        pipeline = CompetitorIntelligencePipeline(provider=CancellingProvider(cancel_event))
        
        with patch.object(ReportAgent, "synthesize") as mock_synthesize:
            with pytest.raises(PipelineCancelledError) as exc_info:
                pipeline.run("Acme", "SaaS", cancel_event=cancel_event)
        
        assert exc_info.value.stage is PipelineStage.ANALYSIS
        mock_synthesize.assert_not_called()
    
    def test_unset_event_does_not_interfere(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test that an unset event lets the run complete."""
        report = pipeline.run("Acme", "SaaS", cancel_event=threading.Event())
        
        assert len(report.competitors) == 3


class TestPipelineConcurrency:
    """Tests for concurrent reuse of a single pipeline."""
    
    def test_concurrent_runs_share_one_instance(self, pipeline: CompetitorIntelligencePipeline) -> None:
        """Test that concurrent runs return their own reports."""
        companies = [f"Company {i}" for i in range(16)]
        
        with ThreadPoolExecutor(max_workers=8) as executor:
            reports = list(executor.map(lambda name: pipeline.run(name, "SaaS"), companies))
        
        assert [report.target_company for report in reports] == companies
        assert all(len(report.competitors) == 3 for report in reports)
    
    def test_failures_are_base_workflow_errors(self, static_provider_factory) -> None:
        """Test that every pipeline failure can be caught by one type."""
        pipeline = CompetitorIntelligencePipeline(
            provider=static_provider_factory(error=ProviderError("down"))
        )
        
        with pytest.raises(BaseWorkflowError):
            pipeline.run("Acme", "SaaS")
