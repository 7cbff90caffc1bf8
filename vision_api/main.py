from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from vision_api.core.dependencies import get_app_settings
from vision_api.core.exceptions import register_exception_handlers
from vision_api.core.lifespan import lifespan
from vision_api.core.logger import SimpleLogger
from vision_api.router import image_api, media_api, status_api, video_api

logger = SimpleLogger(__name__)


app = FastAPI(
    title="Vision API",
    description="""
    ## Vision API

    Stores images and videos with their visual analysis (faces, keywords)
    and serves them back.

    ### Getting Started

    Try `/api/videos/{id}/summary` to get the faces and keywords that
    matter most in a video, or `/api/status` to see how far the analysis is.
    """,
    version="1.0.0",
    license_info={
        "name": "Apache 2.0",
        "url": "https://www.apache.org/licenses/LICENSE-2.0",
    },
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(media_api.router)
app.include_router(image_api.router)
app.include_router(video_api.router)
app.include_router(status_api.router)

static_folder = Path(get_app_settings().STATIC_FOLDER)
if static_folder.is_dir():
    # mounted last so the API routes win
    app.mount('/', StaticFiles(directory=str(static_folder), html=True), name='static')
else:
    @app.get("/", tags=["root"])
    async def root():
        """
        Root endpoint with API information.
        """
        return {
            "message": "Vision API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
            "status": "/api/status",
        }

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "vision_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
