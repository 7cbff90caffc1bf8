from .summary_service import VideoSummaryService
from .image_service import ImageService
from .media_service import MediaService
