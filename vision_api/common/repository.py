from typing import Generic, Optional, Type, TypeVar

from beanie import Document
from bson import ObjectId

T = TypeVar('T', bound=Document)


def to_object_id(document_id: str | ObjectId) -> Optional[ObjectId]:
    """Parse a path id; ids that are not ObjectIds cannot match any document."""
    if isinstance(document_id, ObjectId):
        return document_id
    if ObjectId.is_valid(document_id):
        return ObjectId(document_id)
    return None


class MongoBaseRepository(Generic[T]):
    def __init__(self, collection: Type[T]):
        self.collection = collection

    @property
    def name(self) -> str:
        return self.collection.Settings.name

    def get_collection(self):
        return self.collection.get_pymongo_collection()

    async def find_raw_by_id(self, document_id: str) -> Optional[dict]:
        oid = to_object_id(document_id)
        if oid is None:
            return None
        return await self.get_collection().find_one({"_id": oid})

    async def count(self, query: Optional[dict] = None) -> int:
        return await self.get_collection().count_documents(query or {})
