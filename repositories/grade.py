# repositories/grade.py
from repositories.base import BaseRepository


class GradeRepository(BaseRepository):
    collection_name = "grades"
    entity = "GRADE"
    search_fields = ("ma_lop", "ma_khoa_hoc", "giang_vien")
