"""
Networking Infrastructure

Network communication components:
- http: REST client base on aiohttp
- websocket: one-connection WebSocket client on websockets
"""
