# =============================================================================
# app/responses.py - Envelope Responses
# =============================================================================
# Workflows return OperationResult{error, data}. Routes send that envelope
# as-is, using the error's status code when there is one.
# =============================================================================

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.models.result import OperationResult


def envelope_response(
    result: OperationResult,
    success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Render an OperationResult as JSON.

    Example:
        return envelope_response(brand_service.create_brand(data), status.HTTP_201_CREATED)
    """
    status_code = result.error.status if result.error else success_status
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"error": result.error, "data": result.data}),
    )
