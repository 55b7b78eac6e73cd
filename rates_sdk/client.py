from pydantic import BaseModel, Field
from urllib.parse import quote
import httpx
from typing import Any, Dict, Optional
from rates_sdk.exceptions import (
    RatesAPIError,
    RecordNotFound,
    InvalidResponse,
)

DEFAULT_COUNTRIES_BASE_URL = "https://restcountries.com"
DEFAULT_RATES_BASE_URL = "https://open.er-api.com"


class RatesClientConfig(BaseModel):
    countries_base_url: str = Field(
        DEFAULT_COUNTRIES_BASE_URL, description="REST Countries API base URL"
    )
    rates_base_url: str = Field(
        DEFAULT_RATES_BASE_URL, description="ExchangeRate-API open access base URL"
    )
    timeout: float = Field(30.0, description="Request timeout in seconds")


class RatesClient:
    """
    Client for the two public APIs behind a rate lookup: country metadata
    (to find a country's currency) and the latest rate table for a base currency.
    Neither API requires credentials.
    """

    def __init__(self, config: Optional[RatesClientConfig] = None):
        self._config = config or RatesClientConfig()
        self._initialize()

    def _initialize(self) -> None:
        self.countries = httpx.Client(
            base_url=self._config.countries_base_url,
            timeout=self._config.timeout,
        )
        self.rates = httpx.Client(
            base_url=self._config.rates_base_url,
            timeout=self._config.timeout,
        )

    @classmethod
    def configure(
        cls,
        countries_base_url: Optional[str] = None,
        rates_base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "RatesClient":
        config = RatesClientConfig(
            countries_base_url=countries_base_url or DEFAULT_COUNTRIES_BASE_URL,
            rates_base_url=rates_base_url or DEFAULT_RATES_BASE_URL,
            timeout=timeout or 30.0,
        )
        return cls(config)

    def request(self, session: httpx.Client, endpoint: str, **kwargs: Any) -> Any:
        try:
            response = session.request("GET", endpoint, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise RecordNotFound(f"Resource not found: {endpoint}")
            raise RatesAPIError(f"API error: {e.response.status_code}")
        except httpx.RequestError as e:
            raise RatesAPIError(f"Request failed: {str(e)}")
        except ValueError:
            raise InvalidResponse("Invalid JSON response from API")

    def get_country(self, name: str) -> Dict[str, Any]:
        """Return the first country record matching ``name``."""
        try:
            data = self.request(self.countries, f"/v3.1/name/{quote(name, safe='')}")
        except RecordNotFound:
            raise RecordNotFound(f"Country not found: {name}")
        if isinstance(data, list):
            if not data:
                raise RecordNotFound(f"Country not found: {name}")
            data = data[0]
        if not isinstance(data, dict):
            raise InvalidResponse(f"Unexpected country payload for: {name}")
        return data

    def get_latest_rates(self, base: str) -> Dict[str, Any]:
        """Return the latest rate table quoted against ``base``."""
        data = self.request(self.rates, f"/v6/latest/{quote(base, safe='')}")
        if not isinstance(data, dict):
            raise InvalidResponse(f"Unexpected rate payload for: {base}")
        return data

    def close(self) -> None:
        self.countries.close()
        self.rates.close()
