"""Tools module for the Exchange Rate Agent."""

from .base import BaseTool
from .exchange_rate import (
    ExchangeRateTool,
    RateLookupResult,
    lookup_exchange_rate,
    resolve_country_alias,
)

__all__ = [
    'BaseTool',
    'ExchangeRateTool',
    'RateLookupResult',
    'lookup_exchange_rate',
    'resolve_country_alias',
]
