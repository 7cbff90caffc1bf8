from .image import ImageRepository
from .video import VideoRepository
