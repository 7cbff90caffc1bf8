from fastapi import Depends, Request, HTTPException, status
from fastapi.security import HTTPBasicCredentials
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from vision_api.controller.vision_controller import VisionController
from vision_api.core.logger import SimpleLogger
from vision_api.core.security import REALM, basic, credentials_match
from vision_api.core.settings import AppSettings, MongoDBSettings, SummarySettings
from vision_api.factory.factory import ServiceFactory
from vision_api.service import ImageService, MediaService, VideoSummaryService

logger = SimpleLogger(__name__)

load_dotenv()


@lru_cache()
def get_app_settings():
    """Get application settings (cached)"""
    return AppSettings()


@lru_cache()
def get_mongo_settings():
    """Get MongoDB settings (cached)"""
    return MongoDBSettings()


@lru_cache()
def get_summary_settings():
    """Get summary thresholds (cached)"""
    return SummarySettings()


def get_service_factory(request: Request) -> ServiceFactory:
    """Get ServiceFactory from app state"""
    service_factory = getattr(request.app.state, 'service_factory', None)
    if service_factory is None:
        logger.error("ServiceFactory not found in app state")
        raise HTTPException(
            status_code=503,
            detail="Service factory not initialized. Please check application startup."
        )
    return service_factory


def get_image_service(service_factory: ServiceFactory = Depends(get_service_factory)) -> ImageService:
    image_service = service_factory.get_image_service()
    if image_service is None:
        logger.error("Image service not available from factory")
        raise HTTPException(status_code=503, detail="Image service not available")
    return image_service


def get_summary_service(service_factory: ServiceFactory = Depends(get_service_factory)) -> VideoSummaryService:
    summary_service = service_factory.get_summary_service()
    if summary_service is None:
        logger.error("Summary service not available from factory")
        raise HTTPException(status_code=503, detail="Summary service not available")
    return summary_service


def get_media_service(service_factory: ServiceFactory = Depends(get_service_factory)) -> MediaService:
    media_service = service_factory.get_media_service()
    if media_service is None:
        logger.error("Media service not available from factory")
        raise HTTPException(status_code=503, detail="Media service not available")
    return media_service


def get_mongo_client(request: Request):
    """Get MongoDB client from app state"""
    mongo_client = getattr(request.app.state, 'mongo_client', None)
    if mongo_client is None:
        logger.error("MongoDB client not found in app state")
        raise HTTPException(
            status_code=503,
            detail="MongoDB client not initialized"
        )
    return mongo_client


async def check_mongodb_health(request: Request) -> bool:
    """Check MongoDB connection health"""
    try:
        mongo_client = get_mongo_client(request)
        await mongo_client.admin.command('ping')
        return True
    except Exception as e:
        logger.error(f"MongoDB health check failed: {str(e)}")
        return False


def require_admin(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic),
    app_settings: AppSettings = Depends(get_app_settings),
) -> None:
    """Basic auth gate for reset/delete. Open to everyone when ADMIN_USERNAME is not set."""
    if not app_settings.ADMIN_USERNAME:
        logger.debug("No authentication configured")
        return
    logger.debug("Authenticating call...")
    # with no password configured no credentials can match
    if (
        credentials is None
        or app_settings.ADMIN_PASSWORD is None
        or not credentials_match(credentials, app_settings.ADMIN_USERNAME, app_settings.ADMIN_PASSWORD)
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
        )


def get_vision_controller(
    image_service: ImageService = Depends(get_image_service),
    summary_service: VideoSummaryService = Depends(get_summary_service),
    media_service: MediaService = Depends(get_media_service),
) -> VisionController:
    """Get vision controller instance"""
    return VisionController(
        image_service=image_service,
        summary_service=summary_service,
        media_service=media_service,
    )
