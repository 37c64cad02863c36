# repositories/enrollment.py
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from common.query import build_query
from common.utils import utcnow
from repositories.base import BaseRepository


class EnrollmentRepository(BaseRepository):
    collection_name = "enrollments"
    entity = "ENROLLMENT"
    search_fields = ("ma_sv", "ma_mon", "ma_lop")

    async def upsert(self, data: dict) -> dict:
        """Create or refresh the active enrollment for (ma_sv, ma_mon, ma_lop)."""
        key = {"ma_sv": data["ma_sv"], "ma_mon": data["ma_mon"], "ma_lop": data["ma_lop"]}
        now = utcnow()
        changes = {**data, "updated_at": now}
        on_insert = {"created_at": now}
        if "thoi_gian_dang_ky" not in changes:
            on_insert["thoi_gian_dang_ky"] = now
        try:
            return await self.collection.find_one_and_update(
                build_query(filters=key),
                {"$set": changes, "$setOnInsert": on_insert},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._fail("UPSERT", e)

    async def find_by_student_id(self, student_id: str):
        return await self.find_many({"ma_sv": student_id})

    async def soft_delete_by_course_id(self, course_id: str) -> int:
        return await self.soft_delete_many({"ma_mon": course_id}, extra={"thoi_gian_huy": utcnow()})
