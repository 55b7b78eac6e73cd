class RatesAPIError(Exception):
    """Base error for the country and exchange rate APIs."""
    pass


class RecordNotFound(RatesAPIError):
    pass


class InvalidResponse(RatesAPIError):
    """Raised when an upstream API answers with an unusable payload."""
    pass
