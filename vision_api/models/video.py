from beanie import Document
from pydantic import Field
from typing import Optional


class Video(Document):
    legacy_id: Optional[str] = None
    name: Optional[str] = None
    source: Optional[str] = Field(None, description="Where the video was captured or uploaded from")
    metadata: dict = Field(default_factory=dict)

    class Settings:
        name = "videos"
