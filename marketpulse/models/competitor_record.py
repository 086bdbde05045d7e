"""Competitor record model for raw competitor data.

This module defines the CompetitorRecord Pydantic model that represents one
peer entity as produced by a data provider, before any analysis.

Example:
    ```python
    from marketpulse.models.competitor_record import CompetitorRecord
    
    record = CompetitorRecord(
        name="Competitor A",
        website="https://competitor-a.com",
        industry="SaaS",
        products=["Product 1"],
        pricing="Premium",
        market_share=25.5,
        strengths=["Strong brand"],
        weaknesses=["High prices"],
    )
    ```
"""

from pydantic import BaseModel, Field


class CompetitorRecord(BaseModel):
    """Raw competitor data for one peer entity.
    
    String fields are kept verbatim: provider data flows through unchanged,
    so no stripping or emptiness checks happen here. Missing list fields
    default to empty lists, never None.
    
    Attributes:
        name: Competitor company name
        website: Competitor website (informational)
        industry: Industry label, echoes the queried industry
        products: Ordered list of products
        pricing: Pricing tier label, e.g. "Premium", "Mid-range", "Enterprise"
        market_share: Market share percentage (non-negative)
        strengths: Ordered list of competitor strengths
        weaknesses: Ordered list of competitor weaknesses
    """
    
    model_config = {"extra": "forbid", "frozen": True}
    
    name: str = Field(
        ...,
        description="Competitor company name",
    )
    
    website: str = Field(
        default="",
        description="Competitor website URL",
    )
    
    industry: str = Field(
        default="",
        description="Industry label the competitor was collected for",
    )
    
    products: list[str] = Field(
        default_factory=list,
        description="List of competitor products or services",
    )
    
    pricing: str = Field(
        default="",
        description="Pricing tier label",
    )
    
    market_share: float = Field(
        default=0.0,
        description="Market share percentage",
        ge=0.0,
    )
    
    strengths: list[str] = Field(
        default_factory=list,
        description="List of competitor strengths",
    )
    
    weaknesses: list[str] = Field(
        default_factory=list,
        description="List of competitor weaknesses",
    )
