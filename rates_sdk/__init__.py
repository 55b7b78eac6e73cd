"""Minimal client for country currency metadata and live exchange rates."""

from rates_sdk.client import RatesClient, RatesClientConfig
from rates_sdk.exceptions import RatesAPIError, RecordNotFound, InvalidResponse

__all__ = [
    'RatesClient',
    'RatesClientConfig',
    'RatesAPIError',
    'RecordNotFound',
    'InvalidResponse',
]
