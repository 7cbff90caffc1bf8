from contextlib import asynccontextmanager

from beanie import init_beanie
from fastapi import FastAPI
from pymongo import AsyncMongoClient

from vision_api.core.dependencies import get_app_settings, get_mongo_settings, get_summary_settings
from vision_api.core.logger import SimpleLogger
from vision_api.factory.factory import ServiceFactory
from vision_api.models import DOCUMENT_MODELS

logger = SimpleLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    mongo_settings = get_mongo_settings()

    logger.info(f"Connecting to MongoDB at {mongo_settings.MONGO_HOST}:{mongo_settings.MONGO_PORT}...")
    client = AsyncMongoClient(mongo_settings.MONGO_URI)
    try:
        # init_beanie creates the collections and indexes the queries rely on
        await init_beanie(database=client[mongo_settings.MONGO_DB], document_models=DOCUMENT_MODELS)
        logger.info(f"Database {mongo_settings.MONGO_DB} ready")

        app.state.mongo_client = client
        app.state.service_factory = ServiceFactory(
            app_settings=get_app_settings(),
            summary_settings=get_summary_settings(),
        )
    except Exception as e:
        logger.error(f"Error in database preparation: {e}")
        await client.close()
        raise

    try:
        yield
    finally:
        logger.info("Closing MongoDB connection")
        await client.close()
