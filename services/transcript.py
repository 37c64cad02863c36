# services/transcript.py
from typing import Optional

from common.pagination import Pagination
from repositories.transcript import TranscriptRepository
from services.base import BaseService
from services.exceptions import TranscriptNotFoundException


class TranscriptService(BaseService):
    name = "transcript"
    not_found = TranscriptNotFoundException

    @classmethod
    def from_db(cls, db):
        return cls(TranscriptRepository(db))

    async def get(
        self,
        pagination: Pagination,
        search: Optional[str] = None,
        nam_hoc: Optional[int] = None,
        hoc_ky: Optional[int] = None,
    ):
        return await super().get(pagination, keyword=search, filters={"nam_hoc": nam_hoc, "hoc_ky": hoc_ky})

    async def get_by_student_id(self, student_id: str):
        async with self._operation("get_by_student_id"):
            return await self.repository.find_by_student_id(student_id)

    async def get_by_course_id(self, course_id: str):
        async with self._operation("get_by_course_id"):
            return await self.repository.find_by_course_id(course_id)
