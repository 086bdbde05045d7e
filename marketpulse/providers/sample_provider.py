"""Sample competitor data provider.

Serves a fixed set of three sample competitors. This is the default
provider until a live market-data source is configured; the shape of its
output is the contract every other provider follows.
"""

from marketpulse.models.competitor_record import CompetitorRecord
from marketpulse.providers.base_provider import CompetitorDataProvider

# (name, website, products, pricing, market share, strengths, weaknesses)
SAMPLE_COMPETITORS: tuple[tuple, ...] = (
    (
        "Competitor A",
        "https://competitor-a.com",
        ("Product 1", "Product 2", "Product 3"),
        "Premium",
        25.5,
        ("Strong brand", "Large customer base", "Innovation"),
        ("High prices", "Slow support", "Limited features"),
    ),
    (
        "Competitor B",
        "https://competitor-b.com",
        ("Product X", "Product Y"),
        "Mid-range",
        18.2,
        ("Affordable", "Good UX", "Fast growth"),
        ("Limited market presence", "Newer player", "Fewer integrations"),
    ),
    (
        "Competitor C",
        "https://competitor-c.com",
        ("Enterprise Suite",),
        "Enterprise",
        12.8,
        ("Enterprise features", "Security", "Compliance"),
        ("Expensive", "Complex setup", "Steep learning curve"),
    ),
)


class SampleDataProvider(CompetitorDataProvider):
    """Provider returning the three sample competitors.
    
    Pure: no I/O and no state. The company name does not influence the
    result; the industry is copied into every record.
    """
    
    @property
    def name(self) -> str:
        return "sample_provider"
    
    def fetch(self, company_name: str, industry: str) -> list[CompetitorRecord]:
        return [
            CompetitorRecord(
                name=name,
                website=website,
                industry=industry,
                products=list(products),
                pricing=pricing,
                market_share=market_share,
                strengths=list(strengths),
                weaknesses=list(weaknesses),
            )
            for name, website, products, pricing, market_share, strengths, weaknesses
            in SAMPLE_COMPETITORS
        ]
