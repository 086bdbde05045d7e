"""Base provider interface for competitor data sources.

This module defines the abstract base class every competitor data source
implements. The market research stage depends on this interface only, so a
fixture, a test double and a network-backed source are interchangeable.
"""

from abc import ABC, abstractmethod

from marketpulse.models.competitor_record import CompetitorRecord


class CompetitorDataProvider(ABC):
    """Base class for all competitor data providers.
    
    Implementations must:
    1. Return a new list on every call
    2. Set each record's ``industry`` to the requested industry
    3. Raise ProviderError (never anything else) when the source fails
    """
    
    @abstractmethod
    def fetch(self, company_name: str, industry: str) -> list[CompetitorRecord]:
        """Fetch competitor records for a company in an industry.
        
        Args:
            company_name: Company to find competitors for (may be empty)
            industry: Industry label (may be empty)
        
        Returns:
            Ordered list of competitor records
        
        Raises:
            ProviderError: If the source cannot produce records
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the provider name, used for logging and identification."""
        pass
