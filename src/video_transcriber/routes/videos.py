"""Video lookup endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from video_transcriber.dependencies import get_repository, get_storage
from video_transcriber.infrastructure.interfaces import StorageClient
from video_transcriber.logging import setup_logging
from video_transcriber.repositories import VideoRepository
from video_transcriber.response_models import (
    ErrorResponse,
    VideoDetail,
    VideoDetailResponse,
)

logger = setup_logging()

router = APIRouter(prefix="/videos", tags=["videos"])

RepositoryDep = Annotated[VideoRepository, Depends(get_repository)]
StorageDep = Annotated[StorageClient, Depends(get_storage)]


@router.get(
    "/{video_id}",
    response_model=VideoDetailResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_video(video_id: str, repo: RepositoryDep, storage: StorageDep):
    """Returns a video with a signed URL for playback."""
    try:
        video = repo.find(video_id)
        if video is None:
            return JSONResponse(
                status_code=404,
                content=ErrorResponse(error="Video not found").model_dump(),
            )

        detail = VideoDetail(
            **video.model_dump(),
            download_url=storage.presigned_download_url(video.file_key),
        )
    except Exception as e:
        logger.error(f"Error fetching video {video_id}: {e}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to fetch video").model_dump(),
        )

    return JSONResponse(
        content=VideoDetailResponse(video=detail).model_dump(mode="json", by_alias=True)
    )
