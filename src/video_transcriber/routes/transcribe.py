"""Transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from video_transcriber.dependencies import get_controller
from video_transcriber.exceptions import ErrorKind
from video_transcriber.handlers import JobStatusController
from video_transcriber.logging import setup_logging
from video_transcriber.response_models import (
    ErrorResponse,
    TranscribeRequest,
    TranscribeResponse,
)

logger = setup_logging()

router = APIRouter(tags=["transcription"])

ControllerDep = Annotated[JobStatusController, Depends(get_controller)]

ERROR_STATUS_CODES = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
}

REQUEST_BODY_SCHEMA = {
    "content": {
        "application/json": {"schema": TranscribeRequest.model_json_schema(by_alias=True)}
    }
}


@router.post(
    "/transcribe",
    response_model=TranscribeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={"requestBody": REQUEST_BODY_SCHEMA},
)
async def transcribe(request: Request, controller: ControllerDep):
    """
    Transcribes a video's audio track.

    Returns the stored transcription when the video was already transcribed.
    The body is validated here so that malformed requests still get an
    ``{"error": ...}`` body: a body that is not JSON is a 500, a missing or
    non-string ``videoId`` is a 400.
    """
    try:
        payload = TranscribeRequest.model_validate_json(await request.body() or b"{}")
    except ValidationError as e:
        if any(error["type"] == "json_invalid" for error in e.errors()):
            logger.warning("Transcribe request body is not valid JSON")
            return JSONResponse(
                status_code=500,
                content=ErrorResponse(error="Internal server error").model_dump(),
            )
        payload = TranscribeRequest()

    video_id = payload.video_id
    outcome = await controller.handle_transcribe_request(video_id)

    if not outcome.succeeded:
        status_code = ERROR_STATUS_CODES.get(outcome.error_kind, 500)
        logger.info(
            "Transcribe request failed",
            extra={
                "video_id": video_id,
                "error_kind": outcome.error_kind.value,
                "status_code": status_code,
            },
        )
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(error=outcome.error).model_dump(),
        )

    response = TranscribeResponse(
        transcription=outcome.transcription,
        status=outcome.status,
        duration=outcome.duration,
        cached=True if outcome.cached else None,
    )
    return JSONResponse(content=response.model_dump(mode="json", exclude_none=True))
