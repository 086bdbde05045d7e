"""Market research agent for acquiring competitor records.

This agent is the acquisition stage of the pipeline. It delegates to an
injected CompetitorDataProvider and enforces the bound on how many records
a report may cover.
"""

import logging
from typing import Any

from marketpulse.agents.base_agent import BaseAgent
from marketpulse.exceptions.provider_error import ProviderError
from marketpulse.graph.state import PipelineState
from marketpulse.models.competitor_record import CompetitorRecord
from marketpulse.providers.base_provider import CompetitorDataProvider

logger = logging.getLogger(__name__)

DEFAULT_MAX_COMPETITORS = 3


class MarketResearchAgent(BaseAgent):
    """Agent that acquires competitor records for a company and industry.
    
    Inputs are not validated: empty company names and industries are passed
    to the provider as-is.
    
    Attributes:
        provider: Source of competitor records
        config: Configuration dictionary; reads "max_competitors"
    """
    
    def __init__(
        self,
        provider: CompetitorDataProvider,
        config: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(config)
        self.provider = provider
    
    @property
    def name(self) -> str:
        return "market_research_agent"
    
    def execute(self, state: PipelineState) -> dict[str, Any]:
        records = self.acquire(
            state.get("company_name", ""),
            state.get("industry", ""),
        )
        return {"records": records}
    
    def acquire(self, company_name: str, industry: str) -> list[CompetitorRecord]:
        """Acquire competitor records from the provider.
        
        The sample provider always returns exactly three records. Other
        providers may return fewer; more than "max_competitors" is rejected.
        
        Args:
            company_name: Company to research
            industry: Industry label copied into every record
        
        Returns:
            New ordered list of competitor records
        
        Raises:
            ProviderError: If the provider fails or exceeds the record bound
        """
        max_competitors = self.config.get("max_competitors", DEFAULT_MAX_COMPETITORS)
        
        try:
            records = list(self.provider.fetch(company_name, industry))
        except ProviderError:
            raise
        except Exception as e:
            logger.error(
                f"Unexpected error from provider {self.provider.name}: {e}",
                exc_info=True
            )
            raise ProviderError(
                f"competitor data provider {self.provider.name} failed: {e}",
                kind="unavailable",
                context={"provider": self.provider.name, "error_type": type(e).__name__},
            ) from e
        
        if len(records) > max_competitors:
            raise ProviderError(
                f"provider returned {len(records)} competitors, "
                f"at most {max_competitors} allowed",
                kind="invalid_response",
                context={"provider": self.provider.name, "count": len(records)},
            )
        if len(records) < max_competitors:
            logger.warning(
                f"Provider {self.provider.name} returned {len(records)} competitors "
                f"(expected {max_competitors})"
            )
        
        logger.info(
            f"Market research completed: {len(records)} competitors "
            f"for industry {industry!r}"
        )
        return records
