"""AI nutrition estimation endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from macro_tracker.api.dependencies import get_container
from macro_tracker.api.errors import request_context
from macro_tracker.api.models import AnalyzeFoodRequest, AnalyzeLabelRequest
from macro_tracker.containers import AppContainer
from macro_tracker.domain.errors import EstimationError

router = APIRouter(prefix="/api", tags=["analysis"])

_logger = logging.getLogger(__name__)

_MANUAL_ENTRY_HINT = (
    "Please try again with a clearer description/image, or use manual entry."
)


@router.post("/analyze-food", response_model=None)
async def analyze_food(
    body: AnalyzeFoodRequest,
    request: Request,
    container: AppContainer = Depends(get_container),
) -> dict[str, object] | JSONResponse:
    """Estimate per-serving nutrition from a photo and/or description."""
    try:
        estimate = await container.estimation_service.estimate_food(
            body.image_base64, body.description
        )
    except EstimationError as exc:
        _logger.exception("Food analysis failed", extra=request_context(request))
        return _estimation_failure(
            container, exc, f"Failed to analyze food. {_MANUAL_ENTRY_HINT}"
        )
    return estimate.model_dump(by_alias=True)


@router.post("/analyze-label", response_model=None)
async def analyze_label(
    body: AnalyzeLabelRequest,
    request: Request,
    container: AppContainer = Depends(get_container),
) -> dict[str, object] | JSONResponse:
    """Read per-serving nutrition from a nutrition label photo."""
    try:
        estimate = await container.estimation_service.analyze_label(
            body.image_base64
        )
    except EstimationError as exc:
        _logger.exception("Label analysis failed", extra=request_context(request))
        return _estimation_failure(
            container,
            exc,
            f"Failed to analyze nutrition label. {_MANUAL_ENTRY_HINT}",
        )
    return estimate.model_dump(by_alias=True)


def _estimation_failure(
    container: AppContainer, exc: Exception, fallback: str
) -> JSONResponse:
    """Return a user-facing estimation error with local debug info."""
    message = fallback
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            message = f"{fallback} (debug: {detail})"
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY, content={"error": message}
    )
