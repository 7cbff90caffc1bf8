from beanie import Document
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class FaceIdentity(BaseModel):
    model_config = ConfigDict(extra='allow')

    name: Optional[str] = Field(None, description="Recognized person, e.g. 'Ada Lovelace'")
    score: float = Field(0.0, description="Identity confidence")
    type_hierarchy: Optional[str] = None


class FaceDetection(BaseModel):
    model_config = ConfigDict(extra='allow')

    identity: Optional[FaceIdentity] = None
    face_location: Optional[dict] = None
    age: Optional[dict] = None
    gender: Optional[dict] = None


class ImageKeyword(BaseModel):
    model_config = ConfigDict(extra='allow', populate_by_name=True)

    class_: Optional[str] = Field(None, alias='class', description="Keyword class, e.g. 'dog'")
    score: float = Field(0.0, description="Classification confidence")
    type_hierarchy: Optional[str] = None


class ImageAnalysis(BaseModel):
    model_config = ConfigDict(extra='allow')

    face_detection: List[FaceDetection] = Field(default_factory=list)
    image_keywords: List[ImageKeyword] = Field(default_factory=list)

    # a null list reads as empty
    @field_validator("face_detection", "image_keywords", mode="before")
    @classmethod
    def ensure_list_defaults(cls, v):
        if v is None:
            return []
        return v


class Image(Document):
    legacy_id: Optional[str] = None      # id from the source export
    video_id: Optional[str] = None       # None for standalone images
    frame_number: Optional[int] = None
    frame_timecode: Optional[float] = None
    analysis: Optional[ImageAnalysis] = None

    class Settings:
        name = "images"
        indexes = [
            [("video_id", 1), ("frame_number", 1)],
        ]
