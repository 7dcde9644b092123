"""HTTP API (FastAPI) for cash desk payments."""

from pos_payments.entrypoints.api.app import create_app

__all__ = ["create_app"]
