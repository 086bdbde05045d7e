"""HTTP competitor data provider.

Fetches competitor records from a JSON market-data service. Every failure
is mapped onto ProviderError with a kind the orchestrator can report:

- request timeout -> "timeout"
- HTTP 429 -> "rate_limited"
- HTTP 404 -> "not_found"
- connection errors and other HTTP errors -> "unavailable"
- payload that is not a list of competitor records -> "invalid_response"

A single attempt is made per call; there is no retry.

Example:
    ```python
    from marketpulse.providers.http_provider import HttpDataProvider
    
    provider = HttpDataProvider("https://data.example.com/v1", timeout=5.0)
    records = provider.fetch("TechStartup", "SaaS")
    ```
"""

import logging
from typing import Any

import requests
from pydantic import ValidationError

from marketpulse.exceptions.provider_error import ProviderError
from marketpulse.models.competitor_record import CompetitorRecord
from marketpulse.providers.base_provider import CompetitorDataProvider

logger = logging.getLogger(__name__)

COMPETITORS_PATH = "/competitors"

_STATUS_KINDS = {
    404: "not_found",
    429: "rate_limited",
}


class HttpDataProvider(CompetitorDataProvider):
    """Provider backed by an HTTP market-data service.
    
    The service is queried with ``GET {base_url}/competitors?company=..&industry=..``
    and must answer with a JSON list of competitor objects, or an object
    holding that list under ``"competitors"``.
    
    Attributes:
        base_url: Service base URL without trailing slash
        api_key: Optional bearer token
        timeout: Request timeout in seconds
    """
    
    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        if not base_url:
            raise ValueError("base_url must not be empty")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
    
    @property
    def name(self) -> str:
        return "http_provider"
    
    def fetch(self, company_name: str, industry: str) -> list[CompetitorRecord]:
        url = f"{self.base_url}{COMPETITORS_PATH}"
        context = {"url": url, "company": company_name, "industry": industry}
        payload = self._get_json(url, company_name, industry, context)
        return self._parse_records(payload, industry, context)
    
    def _get_json(
        self,
        url: str,
        company_name: str,
        industry: str,
        context: dict[str, Any],
    ) -> Any:
        """Perform the request and decode the JSON body.
        
        Raises:
            ProviderError: On timeout, connection failure, HTTP error status
                or a body that is not JSON
        """
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        
        try:
            response = requests.get(
                url,
                params={"company": company_name, "industry": industry},
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.Timeout as e:
            logger.warning(f"Timeout fetching competitors from {url}: {e}")
            raise ProviderError(
                f"competitor data source timed out after {self.timeout}s",
                kind="timeout",
                context=context,
            ) from e
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            kind = _STATUS_KINDS.get(status_code, "unavailable")
            logger.warning(f"Competitor data source returned HTTP {status_code} for {url}")
            raise ProviderError(
                f"competitor data source returned HTTP {status_code}",
                kind=kind,
                context={**context, "status_code": status_code},
            ) from e
        except requests.RequestException as e:
            logger.warning(f"Request to competitor data source {url} failed: {e}")
            raise ProviderError(
                f"competitor data source unavailable: {e}",
                kind="unavailable",
                context=context,
            ) from e
        
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                "competitor data source returned a non-JSON body",
                kind="invalid_response",
                context=context,
            ) from e
    
    def _parse_records(
        self,
        payload: Any,
        industry: str,
        context: dict[str, Any],
    ) -> list[CompetitorRecord]:
        """Convert the decoded payload into competitor records.
        
        Unknown keys on competitor objects are ignored and ``industry`` is
        forced to the requested value.
        
        Raises:
            ProviderError: If the payload is not a list of valid records
        """
        # Accept both a bare list and a {"competitors": [...]} envelope
        if isinstance(payload, dict) and "competitors" in payload:
            payload = payload["competitors"]
        
        if not isinstance(payload, list):
            raise ProviderError(
                f"expected a list of competitors, got {type(payload).__name__}",
                kind="invalid_response",
                context=context,
            )
        
        known_fields = set(CompetitorRecord.model_fields)
        records = []
        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                raise ProviderError(
                    f"competitor entry {index} is not an object",
                    kind="invalid_response",
                    context=context,
                )
            fields = {key: value for key, value in item.items() if key in known_fields}
            fields["industry"] = industry
            try:
                records.append(CompetitorRecord.model_validate(fields))
            except ValidationError as e:
                raise ProviderError(
                    f"competitor entry {index} is invalid: {e.error_count()} validation error(s)",
                    kind="invalid_response",
                    context={**context, "index": index},
                ) from e
        
        logger.debug(f"Fetched {len(records)} competitors from {self.base_url}")
        return records
