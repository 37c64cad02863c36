# repositories/base.py
import logging
from typing import Dict, List, Optional

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from common.exceptions import ConflictException, PersistenceException
from common.pagination import Pagination, PaginatedResponse
from common.query import active_filter, build_query
from common.utils import to_object_id, utcnow

logger = logging.getLogger(__name__)


class BaseRepository:
    """Store access for one collection, scoped to active (not soft-deleted) records.

    Lookups return None when nothing matches; deciding whether that is an
    error is left to the service layer. Driver failures are logged and raised
    as PersistenceException tagged ``<OPERATION>_<ENTITY>_ERROR``.
    """

    collection_name: str = None
    entity: str = "RECORD"
    search_fields = ()
    code_field: Optional[str] = None

    def __init__(self, db):
        self.collection = db[self.collection_name]

    def _fail(self, operation: str, error: Exception):
        code = f"{operation}_{self.entity}_ERROR"
        logger.error(f"{self.collection_name}.repository: {code}: {error}")
        if isinstance(error, DuplicateKeyError):
            return ConflictException(
                f"Duplicate {self.entity.lower()} record", f"DUPLICATE_{self.entity}", details=str(error)
            )
        return PersistenceException(str(error), code)

    def _scoped(self, id: str, extra: Optional[Dict] = None) -> dict:
        query = {"_id": to_object_id(id), **active_filter()}
        if extra:
            query.update(extra)
        return query

    async def create(self, data: dict) -> dict:
        now = utcnow()
        document = {**data, "created_at": now, "updated_at": now}
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise self._fail("CREATE", e)
        document["_id"] = result.inserted_id
        return document

    async def find_all(
        self,
        pagination: Pagination,
        keyword: Optional[str] = None,
        filters: Optional[Dict] = None,
        regex_filters: Optional[Dict] = None,
    ) -> PaginatedResponse:
        query = build_query(keyword, self.search_fields, filters, regex_filters)
        try:
            cursor = self.collection.find(
                query,
                sort=[("_id", ASCENDING)],
                skip=pagination.skip(),
                limit=pagination.limit(),
            )
            data = await cursor.to_list(length=None)
            total = await self.collection.count_documents(query)
        except PyMongoError as e:
            raise self._fail("FIND_ALL", e)
        return PaginatedResponse(
            data,
            pagination.page(),
            pagination.limit(),
            total,
            pagination.total_pages(total),
        )

    async def get_all(self, filters: Optional[Dict] = None) -> List[dict]:
        return await self.find_many(filters)

    async def find_many(self, filters: Optional[Dict] = None) -> List[dict]:
        try:
            return await self.collection.find(build_query(filters=filters)).to_list(length=None)
        except PyMongoError as e:
            raise self._fail("GET_ALL", e)

    async def find_one(self, filters: Dict) -> Optional[dict]:
        try:
            return await self.collection.find_one(build_query(filters=filters))
        except PyMongoError as e:
            raise self._fail("FIND", e)

    async def detail(self, id: str) -> Optional[dict]:
        try:
            return await self.collection.find_one(self._scoped(id))
        except PyMongoError as e:
            raise self._fail("FIND_BY_ID", e)

    get_by_id = detail

    async def find_by_code(self, code: str, exclude_id: Optional[str] = None) -> Optional[dict]:
        filters = {self.code_field: code}
        if exclude_id:
            filters["_id"] = {"$ne": to_object_id(exclude_id)}
        return await self.find_one(filters)

    async def count(self, filters: Optional[Dict] = None) -> int:
        try:
            return await self.collection.count_documents(build_query(filters=filters))
        except PyMongoError as e:
            raise self._fail("COUNT", e)

    async def update(self, id: str, data: dict) -> Optional[dict]:
        # Nothing to change: hand back the record as stored.
        if not data:
            return await self.detail(id)
        changes = {**data, "updated_at": utcnow()}
        try:
            return await self.collection.find_one_and_update(
                self._scoped(id),
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._fail("UPDATE", e)

    async def soft_delete(self, id: str, extra: Optional[Dict] = None) -> Optional[dict]:
        changes = {"deleted_at": utcnow()}
        if extra:
            changes.update(extra)
        try:
            return await self.collection.find_one_and_update(
                self._scoped(id),
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._fail("DELETE", e)

    async def soft_delete_many(self, filters: Dict, extra: Optional[Dict] = None) -> int:
        changes = {"deleted_at": utcnow()}
        if extra:
            changes.update(extra)
        try:
            result = await self.collection.update_many(build_query(filters=filters), {"$set": changes})
        except PyMongoError as e:
            raise self._fail("DELETE_MANY", e)
        return result.modified_count
