# repositories/student.py
from typing import Optional

from pymongo.errors import PyMongoError

from common.query import build_query
from common.utils import to_object_id
from repositories.base import BaseRepository


class StudentRepository(BaseRepository):
    collection_name = "students"
    entity = "STUDENT"
    search_fields = ("ho_ten", "ma_so_sinh_vien")
    code_field = "ma_so_sinh_vien"

    async def find_by_email_or_phone(
        self, email: Optional[str], phone: Optional[str], exclude_id: Optional[str] = None
    ) -> Optional[dict]:
        contacts = []
        if email:
            contacts.append({"email": email})
        if phone:
            contacts.append({"so_dien_thoai": phone})
        if not contacts:
            return None
        clauses = [build_query(), {"$or": contacts}]
        if exclude_id:
            clauses.append({"_id": {"$ne": to_object_id(exclude_id)}})
        try:
            return await self.collection.find_one({"$and": clauses})
        except PyMongoError as e:
            raise self._fail("FIND_BY_EMAIL_OR_PHONE", e)
