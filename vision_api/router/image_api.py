from fastapi import APIRouter, Depends

from vision_api.controller.vision_controller import VisionController
from vision_api.core.dependencies import get_vision_controller, require_admin
from vision_api.schema.interface import ImageRecord
from vision_api.schema.response import DocumentOperationResponse

router = APIRouter(
    prefix="/api/images",
    tags=["image"],
)


@router.get('', response_model=list[ImageRecord])
async def list_standalone_images(controller: VisionController = Depends(get_vision_controller)):
    """Images not linked to a video."""
    return await controller.standalone_images()


@router.get('/{image_id}/reset', response_model=DocumentOperationResponse, dependencies=[Depends(require_admin)])
async def reset_image(image_id: str, controller: VisionController = Depends(get_vision_controller)):
    """Removes the analysis from one image."""
    return await controller.reset_image(image_id)


@router.delete('/{image_id}', response_model=DocumentOperationResponse, dependencies=[Depends(require_admin)])
async def delete_image(image_id: str, controller: VisionController = Depends(get_vision_controller)):
    return await controller.delete_image(image_id)
