from pathlib import Path
from typing import Optional

from vision_api.service import ImageService, MediaService, VideoSummaryService
from vision_api.service.media_service import build_image_url
from vision_api.schema.interface import ImageRecord
from vision_api.schema.response import DocumentOperationResponse, StatusResponse, VideoSummary


class VisionController:

    def __init__(
        self,
        image_service: ImageService,
        summary_service: VideoSummaryService,
        media_service: MediaService,
    ):
        self.image_service = image_service
        self.summary_service = summary_service
        self.media_service = media_service

    async def video_summary(self, video_id: str, base_url: str) -> VideoSummary:
        return await self.summary_service.summarize(
            video_id, lambda image_id: build_image_url(base_url, image_id)
        )

    async def standalone_images(self) -> list[ImageRecord]:
        return await self.image_service.list_standalone_images()

    async def reset_image(self, image_id: str) -> DocumentOperationResponse:
        return await self.image_service.reset_analysis(image_id)

    async def delete_image(self, image_id: str) -> DocumentOperationResponse:
        return await self.image_service.delete_image(image_id)

    async def status(self) -> StatusResponse:
        return await self.image_service.get_status()

    def attachment(self, document_id: str, attachment_type: str) -> Optional[Path]:
        return self.media_service.attachment_path(document_id, attachment_type)
