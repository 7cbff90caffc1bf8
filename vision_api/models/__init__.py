from .image import Image, ImageAnalysis, FaceDetection, FaceIdentity, ImageKeyword
from .video import Video

DOCUMENT_MODELS = [Image, Video]
