"""Maps domain exceptions to HTTP responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pos_payments.domain.exceptions import PaymentServiceError

logger = structlog.get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the PaymentServiceError handler.

    - not_found=True -> 404
    - any other rejection -> 400
    Body is FastAPI's standard {"detail": ...} shape.
    """

    @app.exception_handler(PaymentServiceError)
    async def payment_service_error_handler(
        request: Request, exc: PaymentServiceError
    ) -> JSONResponse:
        status_code = (
            status.HTTP_404_NOT_FOUND if exc.not_found else status.HTTP_400_BAD_REQUEST
        )
        logger.warning(
            "api_request_rejected",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            detail=exc.message,
        )
        return JSONResponse(status_code=status_code, content={"detail": exc.message})
