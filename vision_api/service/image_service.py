from pymongo.errors import PyMongoError

from vision_api.core.logger import SimpleLogger
from vision_api.repository.image import ImageRepository
from vision_api.schema.interface import ImageRecord
from vision_api.schema.response import DocumentOperationResponse, ImageStatus, StatusResponse

logger = SimpleLogger(__name__)


class ImageService:
    def __init__(self, image_repo: ImageRepository):
        self.image_repo = image_repo

    async def list_standalone_images(self) -> list[ImageRecord]:
        return await self.image_repo.get_standalone_images()

    async def reset_analysis(self, image_id: str) -> DocumentOperationResponse:
        logger.info(f"Removing analysis from image {image_id}")
        await self.image_repo.remove_analysis(image_id)
        return DocumentOperationResponse(id=image_id)

    async def delete_image(self, image_id: str) -> DocumentOperationResponse:
        logger.info(f"Deleting image {image_id}")
        await self.image_repo.delete_image(image_id)
        return DocumentOperationResponse(id=image_id)

    async def get_status(self) -> StatusResponse:
        """Overview of the processing state. A count that cannot be computed is left out."""
        status = ImageStatus()
        try:
            status.count = await self.image_repo.count_images()
        except PyMongoError as e:
            logger.warning(f"Could not count images: {e}")
        try:
            status.to_be_analyzed = await self.image_repo.count_to_be_analyzed()
        except PyMongoError as e:
            logger.warning(f"Could not count images to be analyzed: {e}")
        return StatusResponse(images=status)
