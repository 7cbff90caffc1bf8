from pydantic import BaseModel, Field
from typing import Any, Optional

from vision_api.models.image import ImageAnalysis


class OccurrenceThreshold(BaseModel):
    """Minimum requirements for a face or keyword to be kept in a summary."""
    minimum_occurrence: int = Field(..., ge=0, description="Raw sightings required to consider a key")
    minimum_score: float = Field(..., description="Score an occurrence needs to count as above threshold")
    minimum_score_occurrence: int = Field(..., ge=0, description="Above-threshold sightings required to keep a key")
    maximum_occurrence_count: int = Field(..., description="Cap on kept keys, 0 or less means no cap")


class ImageRecord(BaseModel):
    id: str = Field(..., description="Image id")
    video_id: Optional[str] = None
    frame_number: Optional[int] = None
    frame_timecode: Optional[float] = None
    analysis: Optional[ImageAnalysis] = None


class VideoRecord(BaseModel):
    id: str = Field(..., description="Video id")
    name: Optional[str] = None
    source: Optional[str] = None


class Occurrence(BaseModel):
    """One sighting of a key, annotated with where it was seen."""
    key: str
    score: float
    image_id: str
    image_url: str
    timecode: Optional[float] = None
    detail: dict[str, Any] = Field(default_factory=dict)

    def to_response(self) -> dict[str, Any]:
        return {
            **self.detail,
            'image_id': self.image_id,
            'image_url': self.image_url,
            'timecode': self.timecode,
        }
