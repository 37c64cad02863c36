# services/student_status.py
from typing import Optional

from config import STATUS_ALIASES
from repositories.student_status import StudentStatusRepository
from services.base import BaseService
from services.exceptions import StudentStatusNotFoundException


def status_name(record: Optional[dict]) -> Optional[str]:
    """Canonical (Vietnamese) name of a status record."""
    if not record:
        return None
    names = record.get("tinh_trang") or {}
    if names.get("vi"):
        return names["vi"]
    english = names.get("en")
    return STATUS_ALIASES.get(english, english)


class StudentStatusService(BaseService):
    name = "student_status"
    not_found = StudentStatusNotFoundException

    @classmethod
    def from_db(cls, db):
        return cls(StudentStatusRepository(db))

    async def find_by_name(self, name: str) -> Optional[dict]:
        """Match a status by its Vietnamese or English name, case-insensitively."""
        wanted = (name or "").strip()
        if not wanted:
            return None
        wanted = STATUS_ALIASES.get(wanted, wanted).lower()
        async with self._operation("find_by_name"):
            for record in await self.repository.get_all():
                names = record.get("tinh_trang") or {}
                candidates = {(names.get("vi") or "").lower(), (names.get("en") or "").lower()}
                if wanted in candidates or wanted == (status_name(record) or "").lower():
                    return record
        return None
