"""
Module 09D - Relaypost HTTP API (FastAPI)

HTTP API for the request proxy-and-recorder:
- POST /api/request - Execute and record an outbound request
- GET /api/history - List recent exchanges
- GET /api/history/{id} - Fetch one exchange
- DELETE /api/history/{id} - Delete one exchange
- DELETE /api/history - Clear history
- GET /api/health, GET / - Liveness checks

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
