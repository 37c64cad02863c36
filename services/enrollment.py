# services/enrollment.py
from typing import Dict, Optional

from common.utils import utcnow
from repositories.enrollment import EnrollmentRepository
from services.base import BaseService
from services.exceptions import EnrollmentNotFoundException, EnrollmentValidationException

KEY_FIELDS = ("ma_sv", "ma_mon", "ma_lop")


class EnrollmentService(BaseService):
    name = "enrollment"
    not_found = EnrollmentNotFoundException

    @classmethod
    def from_db(cls, db):
        return cls(EnrollmentRepository(db))

    async def upsert(self, data: dict) -> dict:
        """Register a student in a class, refreshing the active registration if one exists."""
        async with self._operation("upsert"):
            missing = [field for field in KEY_FIELDS if not str(data.get(field) or "").strip()]
            if missing:
                raise EnrollmentValidationException(missing)
            data = {**data, **{field: str(data[field]).strip() for field in KEY_FIELDS}}
            return await self.repository.upsert(data)

    create = upsert

    async def get_all(self, filters: Optional[Dict] = None):
        return await super().get_all({k: v for k, v in (filters or {}).items() if k in KEY_FIELDS})

    async def get_by_student_id(self, student_id: str):
        async with self._operation("get_by_student_id"):
            return await self.repository.find_by_student_id(student_id)

    async def delete(self, id: str) -> dict:
        async with self._operation("delete"):
            self._check_id(id)
            record = await self.repository.soft_delete(id, extra={"thoi_gian_huy": utcnow()})
            if record is None:
                raise self.not_found(id)
            return record

    async def delete_by_course_id(self, course_id: str) -> dict:
        async with self._operation("delete_by_course_id"):
            cancelled = await self.repository.soft_delete_by_course_id(course_id)
            return {"ma_mon": course_id, "cancelled": cancelled}
