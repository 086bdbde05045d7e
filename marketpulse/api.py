"""HTTP interface for the competitor intelligence pipeline.

Thin FastAPI layer: it parses the request, runs the pipeline and returns
the report JSON. It contains no analysis logic.

Endpoints:
    GET  /health       Static service identity and version
    POST /api/analyze  Run the pipeline for {"company_name", "industry"}

Example:
    ```python
    from marketpulse.api import create_app

    app = create_app()
    ```
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field, field_validator

from marketpulse import __version__
from marketpulse.config import Config, get_config
from marketpulse.exceptions.base import BaseWorkflowError
from marketpulse.pipeline import CompetitorIntelligencePipeline

logger = logging.getLogger(__name__)


class AnalyzeRequest(BaseModel):
    """Request body for POST /api/analyze. Both fields may be empty."""

    company_name: str = Field(default="", description="Company to analyze")
    industry: str = Field(default="", description="Industry label")

    @field_validator("company_name", "industry", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        """Treat JSON null like an omitted field."""
        return "" if v is None else v


def create_app(
    pipeline: CompetitorIntelligencePipeline | None = None,
    config: Config | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        pipeline: Pipeline to serve. Built from config when not provided.
        config: Optional Config instance. If not provided, uses get_config()

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = get_config()
    if pipeline is None:
        pipeline = CompetitorIntelligencePipeline.from_config(config)

    app = FastAPI(
        title="MarketPulse Competitor Intelligence API",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.get("/health")
    def health() -> dict[str, str]:
        return {
            "status": "healthy",
            "service": config.service_name,
            "version": config.service_version,
        }

    @app.post("/api/analyze")
    def analyze(body: AnalyzeRequest) -> Response:
        try:
            report = pipeline.run(body.company_name, body.industry)
        except BaseWorkflowError as e:
            logger.error(f"Competitor analysis failed: {e}")
            return JSONResponse(status_code=500, content={"error": str(e)})

        return Response(content=report.to_json(), media_type="application/json")

    return app
