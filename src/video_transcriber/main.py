"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from ddtrace import patch_all
from fastapi import FastAPI

from video_transcriber.dependencies import get_controller, init_db
from video_transcriber.routes import transcribe_router, videos_router

patch_all()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    get_controller()
    yield


app = FastAPI(title="Video Transcriber", lifespan=lifespan)
app.include_router(transcribe_router)
app.include_router(videos_router)


@app.get("/health")
def health():
    return {"status": "ok"}
