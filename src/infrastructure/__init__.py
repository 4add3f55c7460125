"""
Infrastructure Components

Foundational services shared by the venue session client:
- networking: WebSocket transport and the REST client base
- logging: non-blocking structured logging
- exceptions: session and REST exception taxonomy
"""
