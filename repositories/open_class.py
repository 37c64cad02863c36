# repositories/open_class.py
from repositories.base import BaseRepository


class OpenClassRepository(BaseRepository):
    collection_name = "open_classes"
    entity = "OPEN_CLASS"
    search_fields = ("ma_lop", "ma_mon_hoc", "giang_vien", "phong_hoc", "lich_hoc")
    code_field = "ma_lop"
