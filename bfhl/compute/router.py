"""FastAPI router for the compute endpoint."""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from structlog import get_logger

from bfhl.config import Settings, get_settings
from bfhl.dependencies import get_http_client, get_provider_overrides
from bfhl.exceptions import BFHLError, InternalError
from bfhl.provider import ProviderOverrides

from .envelope import check_content_type, decode_body, parse_envelope
from .schemas import BFHLResponse
from .service import dispatch

logger = get_logger()

router = APIRouter(tags=["compute"])


@router.post("/bfhl", response_model=BFHLResponse)
async def bfhl_endpoint(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    overrides: Annotated[ProviderOverrides, Depends(get_provider_overrides)],
) -> JSONResponse:
    """Validate a single-key body and return the computed result.

    The body is read raw so that checks run in a fixed order: content type,
    JSON decoding, body shape, key count, then operation constraints.
    Failures are raised as BFHLError and turned into envelopes by the app's
    handlers; anything else becomes a generic InternalError.
    """
    try:
        check_content_type(request.headers.get("content-type"))
        body = decode_body(await request.body())
        envelope = parse_envelope(body)

        data = await dispatch(
            envelope,
            settings=settings,
            client=client,
            overrides=overrides,
            http_request=request,
        )
    except BFHLError:
        raise
    except Exception as e:
        logger.error("compute_internal_error", error=str(e), exc_info=True)
        raise InternalError()

    response = BFHLResponse.success(settings.OFFICIAL_EMAIL, data)
    return JSONResponse(status_code=200, content=response.to_content())
