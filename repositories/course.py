# repositories/course.py
from repositories.base import BaseRepository


class CourseRepository(BaseRepository):
    collection_name = "courses"
    entity = "COURSE"
    search_fields = ("ma_mon_hoc", "ten.vi", "ten.en")
    code_field = "ma_mon_hoc"

    async def find_all_available(self):
        return await self.find_many({"vo_hieu_hoa": {"$ne": True}})
