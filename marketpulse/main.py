"""Main entry point for the MarketPulse competitor intelligence service.

Run a single analysis and print the report JSON:

    ```bash
    python -m marketpulse.main analyze "TechStartup" "SaaS"
    ```

Or start the HTTP API:

    ```bash
    python -m marketpulse.main serve --port 8080
    ```
"""

import argparse
import logging
import sys

from marketpulse.config import Config, get_config
from marketpulse.exceptions.base import BaseWorkflowError
from marketpulse.models.report_model import CompetitorReport
from marketpulse.pipeline import CompetitorIntelligencePipeline

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with the service log format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run_analysis(
    company_name: str,
    industry: str,
    config: Config | None = None,
) -> CompetitorReport:
    """Run the competitor intelligence pipeline once.

    Args:
        company_name: Company to analyze (empty allowed)
        industry: Industry label (empty allowed)
        config: Optional Config instance. If not provided, loads from environment

    Returns:
        The generated CompetitorReport

    Raises:
        StageError: If a pipeline stage fails
    """
    pipeline = CompetitorIntelligencePipeline.from_config(config)
    return pipeline.run(company_name, industry)


def serve(config: Config, host: str | None = None, port: int | None = None) -> None:
    """Serve the HTTP API with uvicorn until interrupted."""
    import uvicorn

    from marketpulse.api import create_app

    host = host or config.host
    port = port or config.port
    logger.info(f"Server starting on {host}:{port}")
    uvicorn.run(create_app(config=config), host=host, port=port)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for command-line usage.

    Args:
        argv: Argument list; defaults to sys.argv[1:]

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = argparse.ArgumentParser(
        description="MarketPulse competitor intelligence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m marketpulse.main analyze "TechStartup" "SaaS"
  python -m marketpulse.main serve --port 8080
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Generate a report and print it as JSON")
    analyze_parser.add_argument("company_name", type=str, help="Company to analyze")
    analyze_parser.add_argument("industry", type=str, help="Industry label")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Listen port")

    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging("DEBUG" if args.verbose else config.log_level)

    if args.command == "serve":
        serve(config, host=args.host, port=args.port)
        return 0

    try:
        report = run_analysis(args.company_name, args.industry, config=config)
    except BaseWorkflowError as e:
        logger.error(f"Analysis failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAnalysis interrupted by user.", file=sys.stderr)
        return 130

    print(report.to_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
