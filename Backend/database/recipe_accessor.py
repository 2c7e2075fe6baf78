"""
Data access for the recipes collection.

Every call is bounded by ``timeout`` seconds; on expiry ``asyncio.TimeoutError``
propagates to the caller.
"""
import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument

# Natural order is not guaranteed stable, so pages are always sorted explicitly
RECIPE_SORT = [("createdAt", ASCENDING), ("_id", ASCENDING)]


class RecipeAccessor:
    def __init__(self, collection, timeout: Optional[float] = None):
        self.collection = collection
        self.timeout = timeout

    async def _run(self, awaitable):
        return await asyncio.wait_for(awaitable, self.timeout)

    async def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        doc = dict(fields)
        doc["createdAt"] = datetime.now(timezone.utc)
        result = await self._run(self.collection.insert_one(doc))
        doc["_id"] = result.inserted_id
        return doc

    async def find_by_id(self, recipe_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self._run(self.collection.find_one({"_id": recipe_id}))

    async def find_page(self, skip: int, limit: int) -> List[Dict[str, Any]]:
        cursor = self.collection.find({}).sort(RECIPE_SORT).skip(skip).limit(limit)
        return await self._run(cursor.to_list(length=limit))

    async def count(self) -> int:
        return await self._run(self.collection.count_documents({}))

    async def update_by_id(self, recipe_id: ObjectId, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if not changes:
            return await self.find_by_id(recipe_id)
        return await self._run(
            self.collection.find_one_and_update(
                {"_id": recipe_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        )

    async def delete_by_id(self, recipe_id: ObjectId) -> bool:
        result = await self._run(self.collection.delete_one({"_id": recipe_id}))
        return result.deleted_count == 1
