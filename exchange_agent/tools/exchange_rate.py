"""Exchange rate tool: country → official currency → live rate against a base currency."""
from typing import Dict, Any, Optional
import logging

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from exchange_agent.timeutils import utc_timestamp
from exchange_agent.exceptions import ValidationError
from exchange_agent.tools.base import BaseTool
from rates_sdk.client import RatesClient
from rates_sdk.exceptions import RatesAPIError, RecordNotFound
from rates_sdk.resources.base import Country, RateTable

logger = logging.getLogger(__name__)

DEFAULT_BASE_CURRENCY = "USD"

# Common short forms the country API does not resolve on its own.
COUNTRY_ALIASES = {
    "uk": "United Kingdom",
    "u.k.": "United Kingdom",
    "britain": "United Kingdom",
    "great britain": "United Kingdom",
    "england": "United Kingdom",
    "us": "United States",
    "u.s.": "United States",
    "usa": "United States",
    "u.s.a.": "United States",
    "america": "United States",
    "uae": "United Arab Emirates",
}


def resolve_country_alias(country: str) -> str:
    """Map a known short form to the full country name; other names pass through."""
    cleaned = country.strip()
    return COUNTRY_ALIASES.get(cleaned.lower(), cleaned)


class RateLookupResult(BaseModel):
    """Outcome of a rate lookup. Callers must check ``success``."""

    country: str
    base: str
    target: str
    rate: float
    currencyName: str
    lastUpdated: str
    success: bool

    @classmethod
    def failure(cls, country: Optional[str], base: Optional[str]) -> "RateLookupResult":
        return cls(
            country=country or "Unknown",
            base=base or DEFAULT_BASE_CURRENCY,
            target="UNKNOWN",
            rate=0,
            currencyName="Unknown",
            lastUpdated=utc_timestamp(),
            success=False,
        )


def lookup_exchange_rate(country: str, base_currency: str, client: RatesClient) -> RateLookupResult:
    """
    Look up the rate from ``base_currency`` to the official currency of ``country``.

    Makes two sequential calls: the country lookup determines which code to read
    from the base currency's rate table. Every failure is returned as an
    unsuccessful result rather than raised.
    """
    try:
        logger.info(f"Fetching currency for: {country}")
        country_info = Country.from_api_data(client.get_country(country))

        primary = country_info.primary_currency()
        if primary is None:
            raise RecordNotFound(f"No currency found for: {country}")
        target_code, currency = primary

        logger.info(f"Fetching rate: {base_currency} -> {target_code}")
        rate_table = RateTable.from_api_data(client.get_latest_rates(base_currency))
        if rate_table.is_error:
            raise RatesAPIError(f"Exchange rate error: {rate_table.error_type}")

        rate = rate_table.rates.get(target_code)
        if not rate:
            raise RecordNotFound(f"No rate available for {target_code}")

        return RateLookupResult(
            country=country,
            base=base_currency,
            target=target_code,
            rate=rate,
            currencyName=currency.name,
            lastUpdated=rate_table.time_last_update_utc or utc_timestamp(),
            success=True,
        )
    except (RatesAPIError, PydanticValidationError) as e:
        logger.error(f"Exchange rate lookup failed for {country}/{base_currency}: {e}")
        return RateLookupResult.failure(country, base_currency)


class ExchangeRateInput(BaseModel):
    country: str = Field(..., min_length=2, description="Country name to get currency from")
    baseCurrency: str = Field(
        DEFAULT_BASE_CURRENCY,
        min_length=3,
        max_length=3,
        description="Base currency code (e.g., USD, EUR, GBP)",
    )


class ExchangeRateTool(BaseTool):
    """Tool for fetching the exchange rate between a base currency and a country's currency."""

    def __init__(self, client: RatesClient):
        self.client = client

    @property
    def name(self) -> str:
        return "get-exchange-rate"

    @property
    def description(self) -> str:
        return "Get exchange rate between base currency and target country's currency"

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "country": {
                    "type": "string",
                    "minLength": 2,
                    "description": "Full country name, e.g. 'Japan', 'Germany', 'United Kingdom'"
                },
                "baseCurrency": {
                    "type": "string",
                    "minLength": 3,
                    "maxLength": 3,
                    "description": "Base currency code (e.g., USD, EUR, GBP). Defaults to USD."
                }
            },
            "required": ["country", "baseCurrency"],
            "additionalProperties": False
        }

    def validate_input(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate tool arguments and normalize country and currency."""
        try:
            parsed = ExchangeRateInput(**(data or {}))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid arguments for {self.name}: {e}")

        return {
            "country": resolve_country_alias(parsed.country),
            "baseCurrency": parsed.baseCurrency.upper(),
        }

    def execute(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            validated = self.validate_input(data)
        except ValidationError as e:
            logger.warning(str(e))
            return {
                "success": False,
                "error": str(e)
            }

        result = lookup_exchange_rate(validated["country"], validated["baseCurrency"], self.client)
        return result.model_dump()
