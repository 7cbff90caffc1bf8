from vision_api.common.repository import MongoBaseRepository
from vision_api.core.exceptions import DocumentNotFoundError
from vision_api.models.video import Video
from vision_api.schema.interface import VideoRecord


class VideoRepository(MongoBaseRepository[Video]):

    def __init__(self):
        super().__init__(Video)

    async def get_video(self, video_id: str) -> VideoRecord:
        doc = await self.find_raw_by_id(video_id)
        if doc is None:
            raise DocumentNotFoundError(self.name, video_id)
        return VideoRecord(id=str(doc["_id"]), name=doc.get("name"), source=doc.get("source"))
