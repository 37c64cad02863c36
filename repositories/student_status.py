# repositories/student_status.py
from repositories.base import BaseRepository


class StudentStatusRepository(BaseRepository):
    collection_name = "student_statuses"
    entity = "STUDENT_STATUS"
    search_fields = ("tinh_trang.vi", "tinh_trang.en")
