from fastapi import APIRouter, Depends, Request, Response

from vision_api.controller.vision_controller import VisionController
from vision_api.core.dependencies import check_mongodb_health, get_vision_controller
from vision_api.schema.response import StatusResponse

router = APIRouter(tags=["status"])


@router.get('/api/status', response_model=StatusResponse, response_model_exclude_none=True)
async def get_status(response: Response, controller: VisionController = Depends(get_vision_controller)):
    """Overview of the processing state, read from the database."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Origin, X-Requested-With, Content-Type, Accept"
    return await controller.status()


@router.get('/health')
async def health(request: Request):
    mongodb = await check_mongodb_health(request)
    return {"status": "ok" if mongodb else "degraded", "mongodb": mongodb}
