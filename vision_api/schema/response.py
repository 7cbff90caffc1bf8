from pydantic import BaseModel, Field
from typing import Any, Optional


class SummaryEntry(BaseModel):
    occurrences: list[dict[str, Any]]


class VideoSummary(BaseModel):
    face_detection: list[SummaryEntry]
    image_keywords: list[SummaryEntry]


class DocumentOperationResponse(BaseModel):
    id: str
    ok: bool = True


class ImageStatus(BaseModel):
    count: Optional[int] = Field(None, description="Number of images in the store")
    to_be_analyzed: Optional[int] = Field(None, description="Images without analysis yet")


class StatusResponse(BaseModel):
    images: ImageStatus
