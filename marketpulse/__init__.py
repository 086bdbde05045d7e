"""MarketPulse competitor intelligence service.

A three-stage pipeline (market research, positioning analysis, report
synthesis) that turns a company/industry query into a structured
competitive-intelligence report.
"""

__version__ = "1.0.0"
