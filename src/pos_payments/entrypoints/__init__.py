"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- API: HTTP endpoints (FastAPI routes) and the uvicorn runner

Entrypoints translate external requests into payment service calls
and format responses for the delivery mechanism.
"""
