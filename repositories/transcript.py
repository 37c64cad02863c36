# repositories/transcript.py
from repositories.base import BaseRepository


class TranscriptRepository(BaseRepository):
    collection_name = "transcripts"
    entity = "TRANSCRIPT"
    search_fields = ("ma_mon_hoc", "ma_so_sinh_vien", "trang_thai")

    async def find_by_student_id(self, student_id: str):
        return await self.find_many({"ma_so_sinh_vien": student_id})

    async def find_by_course_id(self, course_id: str):
        return await self.find_many({"ma_mon_hoc": course_id})
