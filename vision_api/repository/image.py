"""
Image repository. Reads and writes image documents and their analysis through the raw pymongo collection.
"""

from typing import List

from vision_api.common.repository import MongoBaseRepository, to_object_id
from vision_api.core.exceptions import DocumentNotFoundError
from vision_api.models.image import Image
from vision_api.schema.interface import ImageRecord

IMAGE_PROJECTION = {
    "_id": 1,
    "video_id": 1,
    "frame_number": 1,
    "frame_timecode": 1,
    "analysis": 1,
}


def to_image_record(doc: dict) -> ImageRecord:
    return ImageRecord(
        id=str(doc["_id"]),
        video_id=doc.get("video_id"),
        frame_number=doc.get("frame_number"),
        frame_timecode=doc.get("frame_timecode"),
        analysis=doc.get("analysis"),
    )


class ImageRepository(MongoBaseRepository[Image]):

    def __init__(self):
        super().__init__(Image)

    async def get_images_by_video_id(self, video_id: str) -> List[ImageRecord]:
        cur = self.get_collection().find({"video_id": video_id}, IMAGE_PROJECTION).sort(
            [("frame_number", 1), ("_id", 1)]
        )
        docs = await cur.to_list(length=None)
        return [to_image_record(d) for d in docs]

    async def get_standalone_images(self) -> List[ImageRecord]:
        # images not linked to a video have no video_id, or an explicit null
        cur = self.get_collection().find({"video_id": None}, IMAGE_PROJECTION).sort([("_id", 1)])
        docs = await cur.to_list(length=None)
        return [to_image_record(d) for d in docs]

    async def remove_analysis(self, image_id: str) -> str:
        oid = to_object_id(image_id)
        if oid is None:
            raise DocumentNotFoundError(self.name, image_id)
        res = await self.get_collection().update_one({"_id": oid}, {"$unset": {"analysis": ""}})
        if res.matched_count == 0:
            raise DocumentNotFoundError(self.name, image_id)
        return image_id

    async def delete_image(self, image_id: str) -> str:
        oid = to_object_id(image_id)
        if oid is None:
            raise DocumentNotFoundError(self.name, image_id)
        res = await self.get_collection().delete_one({"_id": oid})
        if res.deleted_count == 0:
            raise DocumentNotFoundError(self.name, image_id)
        return image_id

    async def count_images(self) -> int:
        return await self.count()

    async def count_to_be_analyzed(self) -> int:
        return await self.count({"analysis": None})
