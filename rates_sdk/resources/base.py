from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

T = TypeVar("T", bound="BaseResource")


class BaseResource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_api_data(cls: Type[T], data: Dict) -> T:
        return cls(**data)


class CountryName(BaseResource):
    common: str = ""
    official: str = ""


class Currency(BaseResource):
    name: str = "Unknown"
    symbol: Optional[str] = None


class Country(BaseResource):
    name: CountryName = Field(default_factory=CountryName)
    currencies: Dict[str, Currency] = Field(default_factory=dict)

    def primary_currency(self) -> Optional[Tuple[str, Currency]]:
        """First currency listed for the country, as (code, currency)."""
        for code, currency in self.currencies.items():
            return code, currency
        return None


class RateTable(BaseResource):
    result: str = "success"
    base_code: Optional[str] = None
    time_last_update_utc: Optional[str] = None
    rates: Dict[str, float] = Field(default_factory=dict)
    error_type: Optional[str] = Field(None, alias="error-type")

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]) -> "RateTable":
        payload = dict(data)
        # The provider has used both spellings for the error field.
        if "error_type" in payload and "error-type" not in payload:
            payload["error-type"] = payload.pop("error_type")
        return cls(**payload)

    @property
    def is_error(self) -> bool:
        return self.result == "error"
