from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from vision_api.controller.vision_controller import VisionController
from vision_api.core.dependencies import get_vision_controller
from vision_api.schema.request import AttachmentType

router = APIRouter(
    prefix="/images",
    tags=["media"],
    responses={404: {"description": "Not found"}},
)


@router.get('/{attachment_type}/{document_id}.jpg', name='get_attachment')
async def get_attachment(
    attachment_type: AttachmentType,
    document_id: str,
    controller: VisionController = Depends(get_vision_controller),
):
    """Image attachment of a video or image, such as a video thumbnail or the frame itself."""
    p = controller.attachment(document_id, attachment_type)
    if p is None:
        raise HTTPException(status_code=404, detail=f"No {attachment_type} for '{document_id}'")
    return FileResponse(p, media_type="image/jpeg")
