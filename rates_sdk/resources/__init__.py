from rates_sdk.resources.base import Country, Currency, RateTable

__all__ = ['Country', 'Currency', 'RateTable']
