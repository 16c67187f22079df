from typing import Optional
from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from src.config import settings
from src.services.transcript import TranscriptService

app = FastAPI(title="YouTube Transcript Summarizer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

service = TranscriptService()

@app.get("/api/transcript")
def transcript(
    url: Optional[str] = Query(None, description="Video page URL"),
    video_id: Optional[str] = Query(None, alias="videoId", description="11-character video id"),
):
    status, body = service.handle(url=url, video_id=video_id)
    return JSONResponse(status_code=status, content=body)

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
