"""Run the API with uvicorn (``pos-payments-api`` console script)."""

import uvicorn

from pos_payments.config import get_settings
from pos_payments.entrypoints.api.app import create_app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
