# repositories/faculty.py
from repositories.base import BaseRepository


class FacultyRepository(BaseRepository):
    collection_name = "faculties"
    entity = "FACULTY"
    search_fields = ("ma_khoa", "ten_khoa.vi", "ten_khoa.en")
    code_field = "ma_khoa"
