"""
Import a JSON export of the vision database (videos and images with their analysis) into MongoDB.
"""

import argparse
import asyncio
import json
import os
import sys

from beanie import PydanticObjectId, init_beanie
from pymongo import AsyncMongoClient
from tqdm import tqdm

from vision_api.core.settings import MongoDBSettings
from vision_api.models import DOCUMENT_MODELS, Image, Video

SETTING = MongoDBSettings()

IMAGE_FIELDS = ('frame_number', 'frame_timecode', 'analysis')
VIDEO_FIELDS = ('name', 'source')


async def init_db() -> AsyncMongoClient:
    client = AsyncMongoClient(SETTING.MONGO_URI)
    await init_beanie(database=client[SETTING.MONGO_DB], document_models=DOCUMENT_MODELS)
    return client


def load_json_data(file_path):
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def extract_docs(data) -> list[dict]:
    """
    Accepts a bare list of documents, {"docs": [...]} as used by bulk exports,
    or {"rows": [{"doc": ...}]} as returned by an all_docs query with include_docs.
    Design documents are skipped.
    """
    if isinstance(data, dict):
        if 'docs' in data:
            docs = data['docs']
        elif 'rows' in data:
            docs = [row['doc'] for row in data['rows'] if row.get('doc')]
        else:
            raise ValueError("Expected a list of documents, a 'docs' or a 'rows' key")
    else:
        docs = data
    return [d for d in docs if not str(d.get('_id', '')).startswith('_design/')]


def split_documents(docs: list[dict]) -> tuple[list[dict], list[dict]]:
    videos, images = [], []
    for doc in docs:
        doc_type = doc.get('type')
        if doc_type == 'video':
            videos.append(doc)
        elif doc_type == 'image':
            images.append(doc)
    return videos, images


def assign_video_ids(videos: list[dict]) -> dict[str, PydanticObjectId]:
    """New ObjectId for every exported video, keyed by its exported id."""
    return {str(v['_id']): PydanticObjectId() for v in videos}


def transform_image(doc: dict, video_ids: dict[str, PydanticObjectId]) -> dict:
    fields = {k: doc[k] for k in IMAGE_FIELDS if doc.get(k) is not None}
    fields['legacy_id'] = str(doc['_id']) if '_id' in doc else None

    legacy_video = doc.get('video_id')
    if legacy_video is not None:
        new_id = video_ids.get(str(legacy_video))
        # an image whose video is not in the export keeps its old reference
        fields['video_id'] = str(new_id) if new_id is not None else str(legacy_video)
    return fields


def transform_video(doc: dict, video_ids: dict[str, PydanticObjectId]) -> dict:
    fields = {k: doc[k] for k in VIDEO_FIELDS if doc.get(k) is not None}
    fields['id'] = video_ids[str(doc['_id'])]
    fields['legacy_id'] = str(doc['_id'])
    fields['metadata'] = {
        k: v for k, v in doc.items()
        if k not in VIDEO_FIELDS and k not in ('_id', '_rev', '_attachments', 'type')
    }
    return fields


async def migrate(file_path: str):
    docs = extract_docs(load_json_data(file_path))
    videos, images = split_documents(docs)
    video_ids = assign_video_ids(videos)

    video_docs = [Video(**transform_video(v, video_ids)) for v in tqdm(videos, desc='Preparing videos')]
    image_docs = [Image(**transform_image(i, video_ids)) for i in tqdm(images, desc='Preparing images')]

    await Video.delete_all()
    await Image.delete_all()

    if video_docs:
        await Video.insert_many(video_docs)
    if image_docs:
        await Image.insert_many(image_docs)
    print(f"Inserted {len(video_docs)} videos and {len(image_docs)} images into the database.")


async def main(args):
    client = await init_db()
    try:
        await migrate(args.file_path)
    finally:
        await client.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Migrate a vision database export to MongoDB.")
    parser.add_argument(
        "--file_path", type=str, required=True, help="Path to the JSON export containing video and image documents."
    )

    args = parser.parse_args()

    if not os.path.exists(args.file_path):
        print(f"File {args.file_path} does not exist.")
        sys.exit(1)

    asyncio.run(main(args))
