"""
Venue integrations.

Each venue lives in its own package; currently only ``exchanges.cryptocom``
(Crypto.com Exchange v2: market/user WebSocket session and REST wrappers).
"""
