from vision_api.core.logger import SimpleLogger
from vision_api.core.settings import AppSettings, SummarySettings
from vision_api.repository import ImageRepository, VideoRepository
from vision_api.service import ImageService, MediaService, VideoSummaryService

logger = SimpleLogger(__name__)


class ServiceFactory:
    """Builds repositories and services once, after beanie has been initialized."""

    def __init__(self, app_settings: AppSettings, summary_settings: SummarySettings):
        image_repo = ImageRepository()
        video_repo = VideoRepository()

        self._image_service = ImageService(image_repo=image_repo)
        self._media_service = MediaService(media_folder=app_settings.MEDIA_FOLDER)
        self._summary_service = VideoSummaryService(
            video_repo=video_repo,
            image_repo=image_repo,
            face_threshold=summary_settings.face_threshold(),
            keyword_threshold=summary_settings.keyword_threshold(),
        )
        logger.info("Services initialized")

    def get_image_service(self) -> ImageService:
        return self._image_service

    def get_media_service(self) -> MediaService:
        return self._media_service

    def get_summary_service(self) -> VideoSummaryService:
        return self._summary_service
