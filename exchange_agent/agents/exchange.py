"""The currency exchange rate agent and the default registry that hosts it."""
from typing import Optional

from exchange_agent.ai.model_client import ModelClient, OpenAIModelClient
from exchange_agent.config import Settings, get_settings
from exchange_agent.tools.exchange_rate import ExchangeRateTool
from rates_sdk.client import RatesClient

from .base import Agent
from .registry import AgentRegistry

EXCHANGE_AGENT_ID = "exchangeAgent"

EXCHANGE_AGENT_INSTRUCTIONS = """
You are a currency exchange rate assistant. You MUST use the get-exchange-rate tool for ALL exchange rate queries.

TOOL FUNCTION: get-exchange-rate
PARAMETERS:
- country: string (REQUIRED - full country name like "Japan", "Germany", "United Kingdom")
- baseCurrency: string (REQUIRED - 3-letter currency code like "USD", "EUR", "GBP")

EXTRACTION RULES:
1. Extract the full country name from the query:
   - "Japan" → "Japan"
   - "Germany" → "Germany"
   - "UK", "Britain" → "United Kingdom"
   - "USA", "US" → "United States"

2. Extract the base currency code (3-letter) or default to "USD":
   - "EUR to INR" → baseCurrency: "INR"
   - "USD in Yen" → baseCurrency: "USD"
   - "Japan rate" → baseCurrency: "USD" (default)
   - "Convert 100 GBP to NGN" → baseCurrency: "GBP"

IMPORTANT:
- Always use the parameter name baseCurrency, not "currency".
- Never pass undefined, null, or incorrect parameter names.
- If no base currency is mentioned, default to "USD".
- If the tool result has success=false, tell the user the rate could not be found and suggest checking the country name.

EXAMPLES:
Query: "Japan exchange rate" → { country: "Japan", baseCurrency: "USD" }
Query: "EUR to INR for Japan" → { country: "Japan", baseCurrency: "INR" }
Query: "100 USD in Japanese Yen" → { country: "Japan", baseCurrency: "USD" }
Query: "China currency" → { country: "China", baseCurrency: "USD" }
Query: "Convert 100 GBP to Nigerian Naira" → { country: "Nigeria", baseCurrency: "GBP" }
""".strip()


def build_exchange_agent(
    model_client: ModelClient,
    rates_client: RatesClient,
) -> Agent:
    return Agent(
        agent_id=EXCHANGE_AGENT_ID,
        name="Exchange Rate Agent",
        instructions=EXCHANGE_AGENT_INSTRUCTIONS,
        model_client=model_client,
        tools=[ExchangeRateTool(rates_client)],
        description="Looks up a country's official currency and its live exchange rate against a base currency.",
    )


def build_default_registry(settings: Optional[Settings] = None) -> AgentRegistry:
    """Registry with the exchange agent wired to OpenAI and the public rate APIs."""
    settings = settings or get_settings()
    model_client = OpenAIModelClient(
        model=settings.openai_model,
        max_tool_rounds=settings.max_tool_rounds,
        api_key=settings.openai_api_key,
    )
    rates_client = RatesClient.configure(
        countries_base_url=settings.countries_api_base_url,
        rates_base_url=settings.rates_api_base_url,
        timeout=settings.rates_api_timeout,
    )
    return AgentRegistry([build_exchange_agent(model_client, rates_client)])
