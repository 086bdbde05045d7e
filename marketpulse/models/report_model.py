"""Report model for the final competitive intelligence report.

This module defines the CompetitorReport Pydantic model, the terminal
artifact of the pipeline, and its JSON wire format.

Example:
    ```python
    from marketpulse.models.report_model import CompetitorReport
    
    payload = report.to_json()
    same_report = CompetitorReport.from_json(payload)
    ```
"""

from datetime import datetime

from pydantic import BaseModel, Field

from marketpulse.models.analysis_model import CompetitorAnalysis

JSON_INDENT = 2


class CompetitorReport(BaseModel):
    """Final competitive intelligence report.
    
    Constructed once per request and immutable thereafter.
    
    Attributes:
        generated_at: Timezone-aware time the report was synthesized
        target_company: Queried company name (may be empty)
        competitors: Analyses in the same order as the acquired records
        market_insights: Narrative summary of the analyzed peer set
        recommendations: Ordered strategic recommendations
    """
    
    model_config = {"extra": "forbid", "frozen": True}
    
    generated_at: datetime = Field(
        ...,
        description="Report generation timestamp",
    )
    
    target_company: str = Field(
        default="",
        description="Company the report was generated for",
    )
    
    competitors: list[CompetitorAnalysis] = Field(
        default_factory=list,
        description="Per-competitor analyses",
    )
    
    market_insights: str = Field(
        ...,
        description="Narrative summary of the competitive landscape",
        min_length=1,
    )
    
    recommendations: list[str] = Field(
        default_factory=list,
        description="Strategic recommendations",
    )
    
    def to_json(self) -> str:
        """Serialize the report as two-space indented JSON.
        
        Returns:
            JSON document with ISO-8601 ``generated_at`` and enum values
            rendered as their labels
        """
        return self.model_dump_json(indent=JSON_INDENT)
    
    @classmethod
    def from_json(cls, payload: str | bytes) -> "CompetitorReport":
        """Reconstruct a report from its JSON representation.
        
        Args:
            payload: JSON produced by to_json()
        
        Returns:
            CompetitorReport equal to the serialized one
        
        Raises:
            pydantic.ValidationError: If the payload does not match the schema
        """
        return cls.model_validate_json(payload)
