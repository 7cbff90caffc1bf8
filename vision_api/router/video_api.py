from fastapi import APIRouter, Depends, Request

from vision_api.controller.vision_controller import VisionController
from vision_api.core.dependencies import get_vision_controller
from vision_api.schema.response import VideoSummary

router = APIRouter(
    prefix="/api/videos",
    tags=["video"],
    responses={500: {"description": "Video or its images could not be retrieved"}},
)


@router.get('/{video_id}/summary', response_model=VideoSummary)
async def get_video_summary(
    video_id: str,
    request: Request,
    controller: VisionController = Depends(get_vision_controller),
):
    """
    Summary of the analysis of one video.
    Collects all its images and keeps only the most relevant faces and keywords.
    """
    return await controller.video_summary(video_id, str(request.base_url))
