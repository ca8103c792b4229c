"""
HTTP API for the ticket service.

Run with:
    uvicorn api.main:app --reload
"""

from api.main import app

__all__ = ["app"]
