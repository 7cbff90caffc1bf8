from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from vision_api.core.logger import SimpleLogger

logger = SimpleLogger(__name__)


class VisionStoreError(Exception):
    """Base error for document store operations."""


class DocumentNotFoundError(VisionStoreError):
    def __init__(self, collection: str, document_id: str):
        self.collection = collection
        self.document_id = document_id
        super().__init__(f"{collection} document '{document_id}' not found")


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={'error': str(exc)})


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(VisionStoreError, store_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
