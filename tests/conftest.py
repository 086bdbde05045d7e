"""Pytest configuration and shared fixtures.

This module contains pytest configuration and shared fixtures used
across all test files.
"""

import pytest

from marketpulse import config as config_module
from marketpulse.models.competitor_record import CompetitorRecord
from marketpulse.pipeline import CompetitorIntelligencePipeline
from marketpulse.providers.base_provider import CompetitorDataProvider
from marketpulse.providers.sample_provider import SampleDataProvider


class StaticProvider(CompetitorDataProvider):
    """Test double returning preset records and counting calls."""
    
    def __init__(self, records: list[CompetitorRecord] | None = None, error: Exception | None = None) -> None:
        self.records = records or []
        self.error = error
        self.calls: list[tuple[str, str]] = []
    
    @property
    def name(self) -> str:
        return "static_provider"
    
    def fetch(self, company_name: str, industry: str) -> list[CompetitorRecord]:
        self.calls.append((company_name, industry))
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def premium_record() -> CompetitorRecord:
    """A high-share premium competitor."""
    return CompetitorRecord(
        name="Leader Corp",
        website="https://leader.example.com",
        industry="SaaS",
        products=["Suite"],
        pricing="Premium",
        market_share=25.0,
        strengths=["Brand", "Scale"],
        weaknesses=["Price"],
    )


@pytest.fixture
def sample_provider() -> SampleDataProvider:
    """Provider serving the three sample competitors."""
    return SampleDataProvider()


@pytest.fixture
def static_provider_factory():
    """Factory for StaticProvider test doubles."""
    return StaticProvider


@pytest.fixture
def pipeline(sample_provider: SampleDataProvider) -> CompetitorIntelligencePipeline:
    """Pipeline backed by the sample provider."""
    return CompetitorIntelligencePipeline(provider=sample_provider, config={"max_competitors": 3})


@pytest.fixture(autouse=True)
def reset_global_config():
    """Reset the cached global configuration around each test."""
    config_module._config = None
    yield
    config_module._config = None
