"""Exchange Rate Agent served over the A2A JSON-RPC protocol."""
